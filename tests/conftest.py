from configparser import ConfigParser

import pytest

from utils.config import Config
from tagcloud.tokenizer import build_separators


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path, monkeypatch):
    # get_logger creates Logs/ relative to the working directory
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def separators():
    return build_separators()


@pytest.fixture
def config():
    return Config(ConfigParser())


@pytest.fixture
def sample_file(tmp_path):
    p = tmp_path / "sample.txt"
    p.write_text(
        "The cat sat. The dog ran.\n"
        "the cat, the dog; and (the) bird!\n"
        "Cat-and-dog \"stories\" are `old`.\n",
        encoding="utf-8",
    )
    return str(p)
