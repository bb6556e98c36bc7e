from pathlib import Path

import pytest
import structlog
from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parent.parent / ".env.test", override=True)


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()
