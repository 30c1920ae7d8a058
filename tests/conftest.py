import os

# Headless pygame for every test
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import logging

import pytest

from moo_who.audio_system import MockSoundController
from moo_who.game_system import GameSession, ProgressionStateMachine
from moo_who.main import create_moo_who_config
from moo_who.utils import HybridLogger


@pytest.fixture
def hybrid_logger(tmp_path):
    main_logger = HybridLogger("MooWhoTest", log_dir=str(tmp_path / "logs"))
    yield main_logger
    main_logger.cleanup()


@pytest.fixture
def logger(hybrid_logger):
    return hybrid_logger.get_class_logger("Test", logging.DEBUG)


@pytest.fixture
def config():
    return create_moo_who_config()


@pytest.fixture
def sound_controller(logger):
    return MockSoundController(logger=logger.create_class_logger("MockSound"))


@pytest.fixture
def session(config, sound_controller, logger):
    return GameSession.create(config, sound_controller, logger)


@pytest.fixture
def progression(session, sound_controller, config, logger):
    return ProgressionStateMachine(session, sound_controller, config, logger.create_class_logger("Progression"))
