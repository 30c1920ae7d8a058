#!/usr/bin/env python3
"""
Moo Who? - find the hidden animals by their sounds

Builds the configuration, the audio/pointer/display collaborators and the
game session, then runs the frame loop.
"""

import logging
import os
import signal
import sys
from typing import Optional

from .audio_system import GameSounds, MockSoundController, SoundController, find_missing_sounds
from .display_system import PygameRenderer
from .errors import MooWhoError
from .game_system import (AnimalConfig, AudioConfig, GameConfig, GameManager, GameSession,
                          ProgressionStateMachine)
from .pointer_system import PointerReader, PygamePointerSampler
from .utils import ClassLogger, HybridLogger

# MOCK AUDIO - Set to True (or export MOO_WHO_MOCK_AUDIO=1) to bypass the audio device
USE_MOCK_AUDIO = False

# Global logger reference for signal handlers
_global_logger: Optional[ClassLogger] = None


def emergency_flush_and_log(sig=None, frame=None):
    """Flush logs before the process dies"""
    if _global_logger:
        if sig:
            _global_logger.critical(f"⚠️  SIGNAL RECEIVED: {sig} - Process terminating")
        _global_logger.flush()
    sys.exit(0 if sig in (None, signal.SIGINT) else 1)


def use_mock_audio() -> bool:
    return USE_MOCK_AUDIO or os.environ.get("MOO_WHO_MOCK_AUDIO", "") not in ("", "0")


def create_moo_who_config() -> GameConfig:
    """Default six-animal game"""
    animals = [
        AnimalConfig("cat", "CAT", "cat.png", "cat.wav", x=0.0, y=-0.4),
        AnimalConfig("bird", "BIRD", "bird.png", "bird.wav", x=0.3, y=-0.5),
        AnimalConfig("lion", "LION", "lion.png", "lion.wav", x=0.9, y=-0.8),
        AnimalConfig("elephant", "ELEPHANT", "elephant.png", "elephant.wav", x=-0.5, y=0.35),
        AnimalConfig("dog", "DOG", "dog.png", "dog.wav", x=0.75, y=0.6),
        AnimalConfig("cow", "COW", "cow.png", "cow.wav", x=-0.5, y=-1.0),
    ]
    return GameConfig(
        animals=animals,
        audio=AudioConfig(assets_folder="assets", music_volume=0.4),
        frame_duration_ms=16.67  # ~60 FPS
    )


def create_game_system(config: GameConfig, app_logger: ClassLogger) -> GameManager:
    """
    Create and wire the complete game using the provided config.

    Args:
        config: GameConfig instance
        app_logger: ClassLogger for initialization steps

    Returns:
        GameManager: Configured game manager ready to run
    """
    config.validate()

    game_manager_logger = app_logger.create_class_logger("GameManager", logging.INFO)
    progression_logger = app_logger.create_class_logger("Progression", logging.INFO)
    session_logger = app_logger.create_class_logger("GameSession", logging.INFO)
    sound_logger = app_logger.create_class_logger("SoundController", logging.INFO)
    pointer_logger = app_logger.create_class_logger("PointerReader", logging.INFO)
    renderer_logger = app_logger.create_class_logger("Renderer", logging.INFO)

    sound_controller = None
    renderer = None
    try:
        if use_mock_audio():
            app_logger.info("🔇 Using MockSoundController (audio hardware disabled)")
            sound_controller = MockSoundController(logger=sound_logger)
        else:
            missing = find_missing_sounds(config.audio.assets_folder)
            if missing:
                raise FileNotFoundError(f"Required sound files not found: {missing}")
            sound_controller = SoundController(
                logger=sound_logger,
                frequency=config.audio.mixer_frequency,
                buffer_size=config.audio.mixer_buffer,
                num_channels=config.audio.mixer_channels
            )

        session = GameSession.create(config, sound_controller, session_logger)
        progression = ProgressionStateMachine(session, sound_controller, config, progression_logger)

        renderer = PygameRenderer(config, renderer_logger)
        pointer_reader = PointerReader(PygamePointerSampler(pointer_logger), pointer_logger)

        game_manager = GameManager(
            pointer_reader=pointer_reader,
            renderer=renderer,
            sound_controller=sound_controller,
            session=session,
            progression=progression,
            logger=game_manager_logger,
            frame_duration_ms=config.frame_duration_ms,
            music_path=GameSounds.BACKGROUND_MUSIC.get_sound_path(config.audio.assets_folder),
            music_volume=config.audio.music_volume
        )

        app_logger.info("Moo Who? initialized successfully")
        return game_manager

    except Exception as e:
        app_logger.error(f"Failed to initialize Moo Who?: {e}", exception=e)
        # Release whatever was opened before the failure
        if renderer is not None:
            renderer.cleanup()
        if sound_controller is not None:
            sound_controller.cleanup()
        raise


def main() -> int:
    """Set up and run the game"""
    main_logger = HybridLogger("MooWho")
    app_logger = main_logger.get_class_logger("MooWho")

    global _global_logger
    _global_logger = app_logger
    signal.signal(signal.SIGTERM, emergency_flush_and_log)

    app_logger.info("🐮 MOO WHO? - FIND THE HIDDEN ANIMALS")

    config = create_moo_who_config()
    app_logger.info(f"Animal order: {', '.join(config.animal_order)}")
    app_logger.info(f"Game settings: {config.frame_duration_ms}ms frame duration ({config.target_fps:.1f} FPS), "
                    f"unlock delay {config.timing.unlock_delay_s}s")
    app_logger.info(f"Assets folder: {config.audio.assets_folder}")

    exit_code = 0
    try:
        game_manager = create_game_system(config, app_logger)
        app_logger.info("🚀 Starting Moo Who?...")
        game_manager.run_game_loop()

    except KeyboardInterrupt:
        app_logger.info("⏹️  Moo Who? stopped by user")
    except (MooWhoError, FileNotFoundError) as e:
        app_logger.error(f"Moo Who? could not start: {e}")
        exit_code = 1
    finally:
        app_logger.info("✅ Moo Who? shut down")
        app_logger.flush()
        main_logger.cleanup()

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
