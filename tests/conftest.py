"""Pytest configuration and fixtures."""

from datetime import date

import pytest
import pytest_asyncio

from patra.storage import init_db, make_engine, make_session_factory

COMPLAINT_LETTER = (
    "जिल्हाधिकारी कार्यालय, पुणे\n"
    "विषय:- रस्ता दुरुस्ती बाबत तक्रार\n"
    "मो. 9876543210\n"
    "दिनांक: 15/03/2024"
)

SP_LETTER = """## पोलीस अधीक्षक कार्यालय, अहिल्यानगर
जावक क्र. एसपी/अर्ज/1234/2024
दिनांक: ०५/०२/२०२४

प्रति,
1) मा. पोलीस निरीक्षक, कोतवाली पोलीस स्टेशन
2) मा. उप विभागीय पोलीस अधिकारी, संगमनेर

**विषय:- तक्रारी अर्जाची चौकशी करणे बाबत**

उपरोक्त विषयान्वये कळविण्यात येते की, अर्जदार यांच्या तक्रारी अर्जाची चौकशी करून अहवाल सादर करावा.
मो. ९८७६५४३२१०

आपला विश्वासू
(सुनील जाधव)
पोलीस अधीक्षक, अहिल्यानगर
"""


@pytest.fixture
def complaint_letter():
    """Short complaint letter addressed to the collector's office."""
    return COMPLAINT_LETTER


@pytest.fixture
def sp_letter():
    """Letter from the SP office with a numbered प्रति list and signature."""
    return SP_LETTER


@pytest.fixture
def reference_date():
    """Fixed date so year plausibility checks do not depend on today."""
    return date(2024, 6, 1)


@pytest.fixture
def upload_dir(tmp_path):
    """Create a temporary upload directory."""
    out_dir = tmp_path / "uploads"
    out_dir.mkdir()
    return out_dir


@pytest_asyncio.fixture
async def session():
    """Async session on a fresh in-memory SQLite database."""
    engine = make_engine("sqlite+aiosqlite:///:memory:")
    await init_db(engine)

    async with make_session_factory(engine)() as session:
        yield session

    await engine.dispose()
