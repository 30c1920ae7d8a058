"""
Pygame renderer - draws the scene, the soundboard and the feedback text
"""

import os
from typing import List, Tuple

import pygame

from .interfaces import IRenderer
from ..errors import AssetLoadError
from ..game_system.config import GameConfig
from ..game_system.feedback import COMPLETE_TEXT, WHITE, YELLOW

BLACK = (0, 0, 0)

TITLE_LINES = ("FIND THE", "HIDDEN ANIMALS")
FEEDBACK_POS = (0.0, 0.85)
BANNER_POS = (0.0, 0.70)
SOUNDBOARD_RIGHT = -0.5


def load_image(path: str) -> pygame.Surface:
    """
    Load an image file.

    Raises:
        AssetLoadError: If the file is missing or cannot be decoded
    """
    if not os.path.isfile(path):
        raise AssetLoadError(path, "file not found")
    try:
        return pygame.image.load(path)
    except pygame.error as e:
        raise AssetLoadError(path, str(e)) from e


class PygameRenderer(IRenderer):
    """
    Draws into a pygame window using the game's normalized coordinates
    ((-1, -1) bottom-left, (1, 1) top-right).
    """

    def __init__(self, config: GameConfig, logger):
        """
        Open the window and load every image.

        Args:
            config: Game configuration (display and animal assets)
            logger: ClassLogger instance

        Raises:
            AssetLoadError: If a required image is missing
            pygame.error: If no display is available
        """
        self.logger = logger
        display = config.display
        assets = config.audio.assets_folder

        pygame.display.init()
        pygame.font.init()
        self.screen = pygame.display.set_mode((display.width, display.height))
        pygame.display.set_caption(display.title)
        self.width, self.height = self.screen.get_size()
        self._set_icon(os.path.join(assets, display.icon_image))

        def asset(name: str) -> pygame.Surface:
            return load_image(os.path.join(assets, name)).convert_alpha()

        self.background = pygame.transform.smoothscale(asset(display.background_image), (self.width, self.height))
        self.soundboard = pygame.transform.smoothscale(
            asset(display.soundboard_image),
            self._size_to_pixels(SOUNDBOARD_RIGHT + 1.0, 2.0)
        )
        self.lock_icon = asset(display.lock_image)
        self.play_icon = asset(display.play_image)
        self.pause_icon = asset(display.pause_image)
        self.animal_images: List[pygame.Surface] = [asset(animal.image_file) for animal in config.animals]
        self.button_color = display.button_color

        self.font = pygame.font.Font(None, 28)
        self.logger.info(f"Renderer ready: {self.width}x{self.height}, {len(self.animal_images)} sprites")

    def _set_icon(self, path: str) -> None:
        try:
            pygame.display.set_icon(load_image(path))
        except AssetLoadError as e:
            # The game runs fine with the default icon
            self.logger.warning(f"Window icon not loaded: {e}")

    def to_pixels(self, x: float, y: float) -> Tuple[int, int]:
        return int((x + 1.0) * self.width / 2.0), int((1.0 - y) * self.height / 2.0)

    def _size_to_pixels(self, width: float, height: float) -> Tuple[int, int]:
        return max(1, int(width * self.width / 2.0)), max(1, int(height * self.height / 2.0))

    def _box_rect(self, x: float, y: float, width: float, height: float) -> pygame.Rect:
        """Rect for a normalized box whose (x, y) is its bottom-left corner"""
        left, top = self.to_pixels(x, y + height)
        return pygame.Rect((left, top), self._size_to_pixels(width, height))

    def _blit_icon(self, icon: pygame.Surface, x: float, y: float, size: float) -> None:
        rect = self._box_rect(x, y, size, size)
        self.screen.blit(pygame.transform.smoothscale(icon, rect.size), rect)

    def _draw_text(self, text: str, x: float, y: float, color, centered: bool = False) -> None:
        surface = self.font.render(text, True, color)
        position = self.to_pixels(x, y)
        rect = surface.get_rect(center=position) if centered else surface.get_rect(midleft=position)
        self.screen.blit(surface, rect)

    def render(self, session, show_completion: bool) -> None:
        self.screen.blit(self.background, (0, 0))
        self._draw_soundboard(session)
        self._draw_animals(session)

        if session.feedback.is_visible:
            self._draw_text(session.feedback.text, *FEEDBACK_POS, session.feedback.color, centered=True)
        if show_completion:
            self._draw_text(COMPLETE_TEXT, *BANNER_POS, WHITE, centered=True)

        pygame.display.flip()

    def _draw_soundboard(self, session) -> None:
        self.screen.blit(self.soundboard, self.to_pixels(-1.0, 1.0))
        self._draw_text(TITLE_LINES[0], -0.82, 0.85, YELLOW)
        self._draw_text(TITLE_LINES[1], -0.87, 0.78, YELLOW)

        for button in session.panel.buttons:
            rect = self._box_rect(button.x, button.y, button.width, button.height)
            pygame.draw.rect(self.screen, self.button_color, rect, border_radius=12)
            if button.unlocked:
                self._draw_text(button.label, button.x + 0.03, button.y + button.height / 2, BLACK)
                icon = self.pause_icon if button.is_playing else self.play_icon
                self._blit_icon(icon, button.play_x, button.play_y, button.play_size)
            else:
                self._blit_icon(self.lock_icon, button.lock_x, button.lock_y, button.play_size)

    def _draw_animals(self, session) -> None:
        for (spec, record), image in zip(session.roster, self.animal_images):
            scale = record.pop.scale
            size = spec.size * scale
            center_x, center_y = spec.center
            rect = self._box_rect(center_x - size / 2, center_y - size / 2, size, size)
            self.screen.blit(pygame.transform.smoothscale(image, rect.size), rect)

    def poll_quit(self) -> bool:
        quit_requested = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                quit_requested = True
        return quit_requested

    def cleanup(self) -> None:
        pygame.display.quit()
        self.logger.info("Display closed")
