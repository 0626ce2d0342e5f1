"""Letter type classification.

One ordered table of rules, each mapping a pattern to a letter type label
and the classification group the label belongs to. The first rule matching
anywhere in the text wins. Specific categories are declared before generic
ones: "तक्रारी अर्ज" before "तक्रार" before "अर्ज", the explicit "क वर्ग"
markers before the senior-mail offices they name, and so on.
"""

from .rules import RuleMatch, RuleTable, rule

DEFAULT_LETTER_TYPE = "सामान्य पत्र"
DEFAULT_CLASSIFICATION = "इतर"

SENIOR_MAIL = "वरिष्ठ टपाल"
CLASS_A = "अ वर्ग"
CLASS_C = "क वर्ग"
CLASS_V = "व वर्ग"
REFERENCE = "संदर्भ"
ADMINISTRATIVE = "कायदेशीर व प्रशासकीय"
CYBER = "सायबर आणि तांत्रिक"
APPLICATION = "अर्ज"
LICENSE = "परवाने आणि परवानग्या"
PORTAL = "पोर्टल अर्ज"
OTHERS = "इतर"

POLICE = r"पोल[ीि]स"
# Standalone "क वर्ग" / "अ वर्ग", not the tail of a word such as "एक वर्ग"
C_MARK = r"(?<![ऀ-ॿ])क\s*[-–]?\s*वर्ग[\s\S]{0,120}?"
A_MARK = r"(?<![ऀ-ॿ])अ\s*[-–]?\s*वर्ग"
NOC = r"ना\s*-?\s*हरकत"

LETTER_TYPE_RULES = RuleTable(
    "letter_type",
    [
        # Portal applications
        rule(r"पी\.?\s*जी\.?\s*पोर्टल|PG\s*Portal|pgportal|CPGRAMS", "पोर्टल अर्ज वर्ग-पंतप्रधान (पी.जी.)", PORTAL),
        rule(r"आपले\s+सरकार\s+पोर्टल", "पोर्टल अर्ज वर्ग-आपले सरकार", PORTAL),
        rule(r"HOMD|एच\s*ओ\s*एम\s*डी", "पोर्टल अर्ज वर्ग-एच ओ एम डी (गृहराज्यमंत्री)", PORTAL),
        # Direct visit
        rule(r"प्रत्यक्ष\s+भेट[\s\S]{0,80}?अप(?:्प)?र|अप(?:्प)?र[\s\S]{0,80}?प्रत्यक्ष\s+भेट", "व वर्ग - मा. अप्पर पो.अ. अहमदनगर (प्रत्यक्ष भेट)", CLASS_V),
        rule(r"प्रत्यक्ष\s+भेट", "व वर्ग - मा.पो. अ.सो अहमदनगर (प्रत्यक्ष भेट)", CLASS_V),
        # Explicitly marked class C
        rule(C_MARK + r"सैनिक\s+बोर्ड", "क वर्ग - सैनिक बोर्ड", CLASS_C),
        rule(C_MARK + r"(?:आर्मी|सैन्य)", "क वर्ग - वरिष्ठ आर्मी अधिकारी", CLASS_C),
        rule(C_MARK + r"लोकशाही\s+दिन", "क वर्ग - लोकशाही दिन", CLASS_C),
        rule(C_MARK + POLICE + r"\s+आयुक्त", "क वर्ग - पोलिस आयुक्त", CLASS_C),
        rule(C_MARK + r"विभागीय\s+आयुक्त", "क वर्ग - विभागीय आयुक्त", CLASS_C),
        rule(C_MARK + r"जिल्हाधिकारी", "क वर्ग - जिल्हाधिकारी", CLASS_C),
        rule(C_MARK + r"नगर\s+शहर", "क वर्ग - एस. डी. पी. ओ. नगर शहर", CLASS_C),
        rule(C_MARK + r"नगर\s+तालुका", "क वर्ग - एस. डी. पी. ओ नगर तालुका", CLASS_C),
        rule(C_MARK + r"संगमनेर", "क वर्ग - एस. डी. पी. ओ. संगमनेर", CLASS_C),
        rule(C_MARK + r"श्रीरामपूर", "क वर्ग - एस. डी. पी. ओ. श्रीरामपूर", CLASS_C),
        rule(C_MARK + r"कर्जत", "क वर्ग - एस. डी. पी. ओ. कर्जत", CLASS_C),
        rule(C_MARK + r"शिर्डी", "क वर्ग - एस. डी. पी. ओ. शिर्डी", CLASS_C),
        rule(C_MARK + r"शेवगा[ंव]", "क वर्ग - एस. डी. पी. ओ. शेवगांव", CLASS_C),
        rule(C_MARK + r"सर्व\s+" + POLICE + r"\s+(?:स्टेशन|ठाणे)", "क वर्ग - सर्व पोलिस स्टेशन", CLASS_C),
        rule(C_MARK + r"सर्व\s+शाखा", "क वर्ग - सर्व शाखा", CLASS_C),
        # Senior mail
        rule(r"वरिष्ठ\s+टपाल[\s\S]{0,40}?(?:एसडीपीओ|उप\s*विभागीय)", "वरिष्ठ टपाल - एसडीपीओ", SENIOR_MAIL),
        rule(r"वरिष्ठ\s+टपाल[\s\S]{0,40}?(?:एसपी|" + POLICE + r"\s+अधीक्षक)", "वरिष्ठ टपाल - एसपी", SENIOR_MAIL),
        rule(r"अप(?:्प)?र\s+" + POLICE + r"\s+महासंचालक|Additional\s+Director\s+General", "वरिष्ठ टपाल - अप्पर पोलिस महासंचालक", SENIOR_MAIL),
        rule(POLICE + r"\s+महासंचालक|Director\s+General\s+of\s+Police", "वरिष्ठ टपाल - पोलिस महासंचालक", SENIOR_MAIL),
        rule(r"विशेष\s+" + POLICE + r"\s+महानिरीक्षक|Inspector\s+General\s+of\s+Police", "वरिष्ठ टपाल - विशेष पोलिस महानिरीक्षक", SENIOR_MAIL),
        rule(r"महालेखापाल\s+कार्यालय|Accountant\s+General", "वरिष्ठ टपाल - महालेखापाल कार्यालय, महाराष्ट्र राज्य मुंबई", SENIOR_MAIL),
        rule(r"महालेखापाल", "वरिष्ठ टपाल - महालेखापाल कार्या नागपूर महाराष्ट्र राज्य मुंबई", SENIOR_MAIL),
        rule(r"वेतन\s+पडताळणी\s+पथक", "वरिष्ठ टपाल - संचालक, वेतन पडताळणी पथक, नाशिक", SENIOR_MAIL),
        rule(POLICE + r"\s+आयुक्त|Commissioner\s+of\s+Police", "वरिष्ठ टपाल - पोलिस आयुक्त", SENIOR_MAIL),
        rule(r"विभागीय\s+आयुक्त[\s\S]{0,80}?अर्धशासकीय", "वरिष्ठ टपाल - विभागीय आयुक्त अर्धशासकीय संदर्भ", SENIOR_MAIL),
        rule(r"गृह\s+विभाग\s*,?\s*मंत्रालय|मंत्रालय\s*,?\s*मुंबई", "वरिष्ठ टपाल - महाराष्ट्र शासन", SENIOR_MAIL),
        # Class A: ministers and legislators
        rule(r"पंतप्रधान|Prime\s+Minister", "अ वर्ग - मा. पंतप्रधान", CLASS_A),
        rule(r"उपमुख्यमंत्री|Deputy\s+Chief\s+Minister", "अ वर्ग - मा. उपमुख्यमंत्री", CLASS_A),
        rule(r"मुख्यमंत्री|Chief\s+Minister", "अ वर्ग - मा. मुख्यमंत्री", CLASS_A),
        rule(r"गृह\s*राज्य\s*मंत्री", "अ वर्ग - मा. गृहराज्यमंत्री", CLASS_A),
        rule(r"गृहमंत्री|Home\s+Minister", "अ वर्ग - मा. गृहमंत्री", CLASS_A),
        rule(r"पालक\s*मंत्री", "अ वर्ग - मा. पालक मंत्री", CLASS_A),
        rule(r"केंद्रीय\s+मंत्री|Union\s+Minister", "अ वर्ग - केंद्रीय मंत्री", CLASS_A),
        rule(r"खासदार[\s\S]{0,30}?संदर्भ", "खासदार संदर्भ", REFERENCE),
        rule(r"आमदार[\s\S]{0,30}?संदर्भ", "आमदार संदर्भ", REFERENCE),
        rule(r"खासदार|Member\s+of\s+Parliament", "अ वर्ग - खासदार", CLASS_A),
        rule(r"आमदार|विधानसभा\s+सदस्य|\bM\.?L\.?A\.?\b", "अ वर्ग - आमदार", CLASS_A),
        rule(A_MARK, "अ वर्ग - इतर", CLASS_A),
        # Cyber and technical
        rule(r"सीडीआर\s*/\s*एसडीआर|CDR\s*/\s*SDR|आयपीडीआर|IPDR", "सीडीआर/एसडीआर/सीएएफ/आयएमई/आयपीडीआर/डंप", CYBER),
        rule(r"सीडीआर|\bCDR\b", "सीडीआर", CYBER),
        rule(r"एसडीआर|\bSDR\b", "एसडीआर", CYBER),
        rule(r"सीएएफ|\bCAF\b", "सीएएफ", CYBER),
        rule(r"आयएमईआय|\bIMEI\b", "आयएमईआय", CYBER),
        rule(r"डंप\s*डेटा|dump\s+data", "डंप डेटा", CYBER),
        rule(r"आयटी\s+(?:कायदा|ॲक्ट|अॅक्ट)|माहिती\s+तंत्रज्ञान\s+(?:कायदा|अधिनियम)|\bI\.?T\.?\s+Act\b", "आयटी कायदा", CYBER),
        rule(r"ऑनला[इई]न\s+फसवणूक|online\s+fraud", "ऑनलाईन फसवणूक", CYBER),
        rule(r"फेसबुक|facebook", "फेसबुक", CYBER),
        rule(r"व्हॉट्सअॅप|व्हॉट्सॲप|व्हाट्सअप|whatsapp", "व्हॉट्सअॅप", CYBER),
        rule(r"सायबर|cyber", "सायबर", CYBER),
        # Licenses and permissions
        rule(r"शस्त्र\s+परवान|arms?\s+licen[cs]e", "शस्त्र परवाना", LICENSE),
        rule(r"चारित्र्य\s+पडताळणी|character\s+verification", "चारित्र्य पडताळणी", LICENSE),
        rule(r"लाउडस्पीकर|ध्वनिक्षेपक|loudspeaker", "लाउडस्पीकर परवाना", LICENSE),
        rule(r"मनोरंजन[\s\S]{0,40}?" + NOC, "मनोरंजनाचे कार्यक्रमांना ना-हरकत परवाना", LICENSE),
        rule(r"मिरवणूक|शोभायात्रा|संमेलन", "सभा, संमेलन मिरवणूक, शोभायात्रा ई. करिता परवानगी", LICENSE),
        rule(r"(?:गॅस|पेट्रोल|हॉटेल|बार)[\s\S]{0,60}?" + NOC, "गॅस, पेट्रोल, हॉटेल, बार ई करिता ना-हरकत प्रमाणपत्र", LICENSE),
        rule(r"सशुल्क\s+बंदोबस्त|paid\s+bandobast", "सशुल्क बंदोबस्त", LICENSE),
        rule(r"सुरक्षा\s+रक्षक|security\s+(?:guard\s+)?agency", "सुरक्षा रक्षक एजन्सी", LICENSE),
        rule(r"स्फोटक|explosive", "स्फोटक परवाना", LICENSE),
        rule(r"देवस्थान[\s\S]{0,20}?क\s*वर्ग", "देवस्थान दर्जा क वर्ग", LICENSE),
        rule(r"देवस्थान[\s\S]{0,20}?ब\s*वर्ग", "देवस्थान दर्जा ब वर्ग", LICENSE),
        rule(NOC + r"\s+प्रमाणपत्र|परवाना\s+नूतनीकरण|licen[cs]e", "इतर परवाने", LICENSE),
        # References
        rule(r"आपले\s+सरकार", "आपले सरकार संदर्भ", REFERENCE),
        rule(r"(?:जि\.?\s*पो\.?\s*अधीक्षक|जिल्हा\s+" + POLICE + r"\s+अधीक्षक)[\s\S]{0,30}?संदर्भ", "जि पो अधीक्षक संदर्भ", REFERENCE),
        rule(r"जिल्हाधिकारी[\s\S]{0,30}?संदर्भ", "जिल्हाधिकारी संदर्भ", REFERENCE),
        rule(r"देयक[\s\S]{0,20}?संदर्भ", "देयके संदर्भ", REFERENCE),
        rule(r"न्यायालयीन|न्यायालय|\bcourt\b", "न्यायालयीन संदर्भ", REFERENCE),
        rule(r"नस्ती", "नस्ती संदर्भ", REFERENCE),
        rule(r"पर[िी]पत्रक|circular", "परीपत्रक", REFERENCE),
        rule(r"मंत्री[\s\S]{0,30}?संदर्भ", "मंत्री संदर्भ", REFERENCE),
        rule(r"महापौर|नगरसेवक|corporator", "महापौर पदाधिकारी/नगरसेवक", REFERENCE),
        rule(r"मानवी\s+हक्क|मानवाधिकार|human\s+rights", "मानवी हक्क संदर्भ", REFERENCE),
        rule(r"लोक\s*आयुक्त|lokayukta", "लोक आयुक्त/उप लोक आयुक्त संदर्भ", REFERENCE),
        rule(r"लोकशाही\s+दिन", "लोकशाही दिन संदर्भ", REFERENCE),
        rule(r"तारांकित|अतारांकित|विधानसभा\s+प्रश्न|विधान\s+परिषद\s+प्रश्न", "विधानसभा तारांकिता /अतारांकित प्रश्न", REFERENCE),
        rule(r"विभागीय\s+आयुक्त[\s\S]{0,30}?संदर्भ", "विभागीय आयुक्त संदर्भ", REFERENCE),
        rule(r"शासन\s+पत्र", "शासन पत्र", REFERENCE),
        rule(r"शासन\s+(?:संदर्भ|निर्णय)", "शासन संदर्भ", REFERENCE),
        # Legal and administrative
        rule(r"गोपनीय\s+अर्ज", "गोपनीय अर्ज", APPLICATION),
        rule(r"गोपनीय|confidential", "गोपनीय", ADMINISTRATIVE),
        rule(r"मंजुरी\s+गुन्हा|गुन्हा\s+मंजुरी|sanction\s+for\s+prosecution", "मंजुरी गुन्हा", ADMINISTRATIVE),
        rule(r"त्रुटी", "त्रुटी", ADMINISTRATIVE),
        rule(r"दवाखाना|रुग्णालय\s+नोंद", "दवाखाना नोंद", ADMINISTRATIVE),
        rule(r"संचित\s+रजा|earned\s+leave", "संचित रजा प्रकरण", ADMINISTRATIVE),
        rule(r"पॅरोल|parole", "पॅरोल रजा प्रकरण", ADMINISTRATIVE),
        rule(r"आठवडा\s+डायरी|weekly\s+diary", "आठवडा डायरी", ADMINISTRATIVE),
        rule(r"डेली\s+सेक|daily\s+sec", "डेली सेक", ADMINISTRATIVE),
        rule(r"अंगुली\s*मुद्रा|fingerprint", "अंगुली मुद्रा", ADMINISTRATIVE),
        rule(r"वैद्यकीय\s+(?:बील|बिल|देयक)|medical\s+bill", "वैद्यकीय बील", ADMINISTRATIVE),
        rule(r"टेनंट|भाडेकरू\s+पडताळणी|tenant", "टेनंट व्हेरी फीकेशन", ADMINISTRATIVE),
        rule(r"रजा\s+मंजु", "रजा मंजुरी बाबत", ADMINISTRATIVE),
        rule(r"वॉरंट|warrant", "वॉरंट", ADMINISTRATIVE),
        rule(r"खुलासा|गैरहजर", "खुलासा/ गैरहजर", ADMINISTRATIVE),
        rule(r"मयत\s+समरी|मृत्यू\s+समरी", "मयत समरी मंजूरी बाबत", ADMINISTRATIVE),
        rule(r"व्हिसा|\bvisa\b", "व्हिसा", ADMINISTRATIVE),
        rule(r"विभागीय\s+चौकशी\s+आदेश", "विभागीय चौकशा आदेश", ADMINISTRATIVE),
        rule(r"अंतिम\s+आदेश|final\s+order", "अंतिम आदेश", ADMINISTRATIVE),
        rule(r"प्रसि(?:द्धी|ध्दी)\s+(?:पत्रक|प्रत्रक)|press\s+release", "जिल्हा पोलीस प्रसिध्दी प्रत्रक", ADMINISTRATIVE),
        rule(r"अनुज्ञप्ती|अनुशाप्ती", "अनुशाप्ती", ADMINISTRATIVE),
        rule(r"दफ्तर\s+तपासणी", "दफ्तर तपासणी", ADMINISTRATIVE),
        rule(r"व्ही\.?\s*आय\.?\s*पी|\bVIP\b", "व्ही आय पी दौरा", ADMINISTRATIVE),
        rule(r"बंदोबस्त|bandobast", "बंदोबस्त", ADMINISTRATIVE),
        rule(r"बक्ष[िी]स|शिक्षा\s+आदेश", "बक्षिस /शिक्षा", ADMINISTRATIVE),
        rule(r"प्रभारी\s+अधिकारी\s+आदेश|प्रभार\s+सोपव", "प्रभारी अधिकारी आदेश", ADMINISTRATIVE),
        rule(r"डी\.\s*ओ\.|\bD\.\s*O\.\s*letter|अर्धशासकीय", "डी. ओ.", ADMINISTRATIVE),
        # Applications
        rule(r"अर्ज\s+शाखा|चौकशी\s+अहवाल", "अर्ज शाखा चौकशी अहवाल", APPLICATION),
        rule(r"अपील|\bappeal\b", "अपील", APPLICATION),
        rule(r"सेवांतर्गत\s+प्रशिक्षण|in-?service\s+training", "सेवांतर्गत प्रशिक्षण", APPLICATION),
        rule(r"इमारत\s+शाखा", "इमारत शाखा", APPLICATION),
        rule(r"पेन्शन|निवृत्ती\s*वेतन|pension", "पेन्शन संदर्भात", APPLICATION),
        rule(r"शासकीय\s+वाहन", "शासकीय वाहन परवाना", APPLICATION),
        rule(r"देयके|देयक", "देयके", APPLICATION),
        rule(r"विभागीय\s+चौकशी|departmental\s+(?:inquiry|enquiry)", "विभागीय चौकशी", APPLICATION),
        rule(r"कसूरी", "कसूरी प्रकरण", APPLICATION),
        rule(r"वेतन\s*निश्चिती|वेतननिश्ती", "वेतननिश्ती", APPLICATION),
        rule(r"बदली|\btransfer\b", "बदली", APPLICATION),
        rule(r"स्थानिक\s+अर्ज", "स्थानिक अर्ज", APPLICATION),
        rule(r"नि(?:ना|न)वी\s+अर्ज|anonymous", "निनवी अर्ज", APPLICATION),
        rule(r"जिल्हा\s*सैनिक", "जिल्हासैनिक अर्ज", APPLICATION),
        rule(r"सावकार", "सावकारी संदर्भात अर्ज", APPLICATION),
        rule(r"लोकशाही[\s\S]{0,20}?अर्ज", "लोकशाही संदर्भातील अर्ज", APPLICATION),
        # Others
        rule(r"कोषागार|treasury", "कोषागार", OTHERS),
        rule(r"समादेशक|commandant", "समादेशक", OTHERS),
        rule(POLICE + r"\s+प्रश[िी]क्षण\s+केंद्र|police\s+training\s+(?:centre|center|school)", "प्राचार्य - पोलीस प्रशीक्षण केंद्र", OTHERS),
        rule(r"आत्मदहन", "आत्मदहन", OTHERS),
        rule(r"नागरी\s+हक्क\s+संरक्षण", "नागरी हक्क संरक्षण", OTHERS),
        rule(r"पीसीआर|\bPCR\b", "पीसीआर", OTHERS),
        rule(r"स्टेनो|steno", "स्टेनो", OTHERS),
        rule(r"लघुलेखक", "लघुलेखक", OTHERS),
        # Generic
        rule(r"तक्रारी\s+अर्ज|तक्रार\s+अर्ज", "तक्रारी अर्ज", APPLICATION),
        rule(r"तक्रार|complaint", "तक्रार", APPLICATION),
        rule(r"विनंती\s+(?:अर्ज|पत्र)", "विनंती पत्र", APPLICATION),
        rule(r"अहवाल|\breport\b", "अहवाल", OTHERS),
        rule(r"अर्ज|application", "अर्ज", APPLICATION),
        rule(r"विनंती|\brequest\b", "विनंती पत्र", APPLICATION),
        rule(r"निवेदन|memorandum", "निवेदन", OTHERS),
        rule(r"आदेश|\border\b", "आदेश", ADMINISTRATIVE),
    ],
)


def match_letter_type(text: str) -> RuleMatch:
    """Return the first matching letter type rule as a tagged result."""
    if not isinstance(text, str):
        return RuleMatch()
    return LETTER_TYPE_RULES.first_match(text)


def classify_letter_type(text: str) -> str:
    """Classify a letter into one letter type label."""
    return match_letter_type(text).label_or(DEFAULT_LETTER_TYPE)
