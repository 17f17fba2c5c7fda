"""Unit test configuration - isolated environment for every test"""

import logging

import pytest

STEMMER_ENV_VARS = (
    "STEMMER_VERB_PASS",
    "STEMMER_MAX_WORD_LENGTH",
    "STEMMER_ENCODING",
    "STEMMER_MAX_FILE_SIZE",
    "LOG_LEVEL",
    "LOG_FILE",
    "PORT",
)


@pytest.fixture(autouse=True)
def clean_stemmer_environment(monkeypatch):
    """
    Remove stemmer settings inherited from the shell or a .env file.

    Tests that need a setting use monkeypatch.setenv explicitly.
    """
    for name in STEMMER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # Never pick up a developer's .env.local during unit tests
    monkeypatch.setattr("src.cli.load_environment", lambda *args, **kwargs: None)
    monkeypatch.setattr("src.main.load_environment", lambda *args, **kwargs: None)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Close handlers installed by setup_logging() during a test"""
    root_logger = logging.getLogger()
    original_handlers = list(root_logger.handlers)
    original_level = root_logger.level

    yield

    for handler in list(root_logger.handlers):
        if handler not in original_handlers:
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(original_level)


@pytest.fixture
def sample_text_file(tmp_path):
    """Small English text with punctuation, digits and mixed case"""
    path = tmp_path / "sample.txt"
    path.write_text("Cats, ponies & caresses!\nHopping 42 times.\n", encoding="utf-8")
    return path
