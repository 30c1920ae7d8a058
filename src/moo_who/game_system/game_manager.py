"""
Main game manager - orchestrates pointer input, the state machine, rendering and audio housekeeping
"""

import time
from typing import Optional, TYPE_CHECKING

import psutil

from .states import GameState, GuessingState
from ..utils import OnceInMs

if TYPE_CHECKING:
    from ..audio_system.interfaces import ISoundController
    from ..display_system.interfaces import IRenderer
    from ..pointer_system.interfaces import IPointerReader
    from ..utils import ClassLogger
    from .progression import ProgressionStateMachine
    from .session import GameSession


class GameManager:
    """
    Main game manager that runs the frame loop.

    Per frame, in order:
    1. Read the pointer
    2. Let the current state route clicks (mutates the session)
    3. Advance timers and animations by the wall-clock delta
    4. Render
    5. Reclaim finished one-shot sounds, reconcile play/pause buttons
    """

    def __init__(self,
                 pointer_reader: 'IPointerReader',
                 renderer: 'IRenderer',
                 sound_controller: 'ISoundController',
                 session: 'GameSession',
                 progression: 'ProgressionStateMachine',
                 logger: 'ClassLogger',
                 frame_duration_ms: float = 16.67,
                 music_path: Optional[str] = None,
                 music_volume: float = 0.4):
        """
        Initialize the game manager.

        Args:
            pointer_reader: Edge-detecting pointer input
            renderer: Presentation collaborator
            sound_controller: Audio collaborator
            session: Game state aggregate
            progression: Rules engine operating on the session
            logger: Logger for debugging and monitoring
            frame_duration_ms: Target frame duration in milliseconds
            music_path: Optional looping background music
            music_volume: Background music volume (0.0 to 1.0)
        """
        self.pointer_reader = pointer_reader
        self.renderer = renderer
        self.sound_controller = sound_controller
        self.session = session
        self.progression = progression
        self.logger = logger
        self.target_frame_duration = frame_duration_ms / 1000.0
        self.music_path = music_path
        self.music_volume = music_volume
        self.running = True
        self.frame_count = 0
        self._stopped = False

        # Resource monitoring
        self._memory_monitor = OnceInMs(60000)
        self._process = psutil.Process()

        self.current_state: GameState = GuessingState(self)
        self.current_state.on_enter()

        self.logger.info(f"GameManager initialized: {frame_duration_ms}ms frame duration, "
                         f"{len(session.roster)} animals")

    def run_game_loop(self, max_frames: Optional[int] = None) -> None:
        """
        Run the frame loop with frame duration limiting until the window
        closes, Ctrl+C, or max_frames frames have run.

        Args:
            max_frames: Optional frame budget (headless runs)
        """
        self.logger.info(f"Starting game loop with {self.target_frame_duration * 1000:.1f}ms frame duration")

        if self.music_path:
            self.sound_controller.play_music(self.music_path, self.music_volume)

        last_time = time.time()
        try:
            while self.running:
                frame_start = time.time()
                dt = frame_start - last_time
                last_time = frame_start

                if self.renderer.poll_quit():
                    self.logger.info("Window closed")
                    break

                self.update(dt)

                if max_frames is not None and self.frame_count >= max_frames:
                    break

                sleep_time = self.target_frame_duration - (time.time() - frame_start)
                if sleep_time > 0:
                    time.sleep(sleep_time)

        except KeyboardInterrupt:
            self.logger.info("Game stopped by user (Ctrl+C)")
            self.logger.flush()
        except Exception as e:
            self.logger.error(f"Game loop error: {e}", exception=e)
            raise
        finally:
            self.stop()

    def update(self, dt: float) -> None:
        """
        Run one frame.

        Args:
            dt: Seconds since the previous frame
        """
        if self._memory_monitor.should_execute():
            self._log_memory_usage()

        # 1. Input
        pointer_state = self.pointer_reader.read_pointer()

        # 2. State logic (clicks mutate the session here)
        new_state = self.current_state.update(pointer_state)

        # 3. Time-driven updates (timers started in step 2 wait for the next frame)
        self.progression.update(dt)
        self.session.advance_timers(dt)

        # 4. Render (read-only)
        self.renderer.render(self.session, self.current_state.show_completion)

        # 5. Housekeeping
        self.session.housekeeping()

        if new_state:
            self._transition_to_state(new_state)

        self.frame_count += 1

    def stop(self) -> None:
        """Stop the game and release audio resources (idempotent)"""
        self.running = False
        if self._stopped:
            return
        self._stopped = True

        self.session.shutdown()
        self.sound_controller.stop_music()
        self.sound_controller.cleanup()
        self.pointer_reader.cleanup()
        self.renderer.cleanup()

        self.logger.info(f"Game stopped after {self.frame_count} frames")

    def _log_memory_usage(self) -> None:
        """Log current process memory and CPU usage"""
        try:
            process_mb = self._process.memory_info().rss / 1024 / 1024
            process_cpu = self._process.cpu_percent(interval=None)
            sys_mem = psutil.virtual_memory()
            self.logger.info(
                f"💾 Memory - Process: {process_mb:.1f}MB | "
                f"System: {sys_mem.percent:.1f}% used | "
                f"CPU - Process: {process_cpu:.1f}%"
            )
        except psutil.Error as e:
            self.logger.warning(f"Failed to log system usage: {e}")

    def _transition_to_state(self, new_state: GameState) -> None:
        self.current_state.on_exit()

        old_state_name = self.current_state.__class__.__name__
        new_state_name = new_state.__class__.__name__
        self.logger.info(f"State transition: {old_state_name} → {new_state_name}")

        self.current_state = new_state
        self.current_state.on_enter()

    def get_current_state_name(self) -> str:
        return self.current_state.__class__.__name__
