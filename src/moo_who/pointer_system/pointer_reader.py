"""
Pointer reader implementation with press-edge detection
"""

from .interfaces import IPointerReader, IPointerSampler
from .pointer_state import PointerState


class PointerReader(IPointerReader):
    """
    Pointer reader with state management and edge detection.

    A held button produces exactly one click: the frame on which it went
    down. It must be released before it can click again.

    Example:
        reader = PointerReader(PygamePointerSampler(logger), logger)

        while running:
            state = reader.read_pointer()
            if state.was_clicked:
                logger.info(f"Click at {state.position}")
    """

    def __init__(self, sampler: IPointerSampler, logger):
        """
        Args:
            sampler: IPointerSampler instance for reading the device
            logger: ClassLogger instance
        """
        self._sampler = sampler
        self._logger = logger
        self._previous_pressed = False

        self._sampler.setup()
        self._logger.info(f"PointerReader initialized with {type(sampler).__name__}")

    def read_pointer(self) -> PointerState:
        x, y = self._sampler.read_position()
        pressed = self._sampler.read_pressed()

        state = PointerState(x=x, y=y, is_pressed=pressed, was_pressed=self._previous_pressed)
        self._previous_pressed = pressed

        if state.was_clicked:
            self._logger.debug(f"Click at ({x:.3f}, {y:.3f})")

        return state

    def cleanup(self) -> None:
        self._sampler.cleanup()
        self._logger.info("PointerReader cleanup complete")
