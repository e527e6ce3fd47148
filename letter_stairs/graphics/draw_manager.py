"""
draw_manager.py
---------------
Renders the world state onto a pygame surface.

Responsibilities:
- Load the player sprite through a fallback chain of paths
- Paint sky, clouds, ground, letter blocks and the player through the camera
- Draw on-screen touch buttons and the debug overlay

Letter block highlight flags are transient: they are cleared here once the
block has been drawn.
"""

import os

import pygame

from letter_stairs.core.debug.debug_logger import DebugLogger


SKY_TOP = (0x87, 0xCE, 0xEB)
SKY_BOTTOM = (0xE0, 0xF6, 0xFF)
CLOUD_COLOR = (255, 255, 255, 153)

GROUND_TOP = (0x34, 0xB2, 0x33)
GROUND_BOTTOM = (0x2A, 0x91, 0x29)
GROUND_EDGE = (0x1A, 0x6B, 0x1B)
GROUND_TILE = 38
GROUND_DRAW_OFFSET = 50  # ground art sits lower so the sprite's feet overlap it

BLOCK_TOP = (0xFF, 0x6B, 0x9D)
BLOCK_BOTTOM = (0xFF, 0x14, 0x93)
BLOCK_HIT_TOP = (0xFF, 0xD7, 0x00)
BLOCK_HIT_BOTTOM = (0xFF, 0xA5, 0x00)
BLOCK_EDGE = (0x33, 0x33, 0x33)

SPRITE_EXTRA_HEIGHT = 60
PLACEHOLDER_COLOR = (70, 130, 220)

# (x, y, radius) circles in screen space, drawn behind the world
CLOUDS = (
    ((150, 80, 50), (200, 60, 70), (250, 80, 50)),
    ((800, 120, 50), (850, 100, 70), (900, 120, 50)),
)


class DrawManager:
    """Stateless painter plus a small image cache."""

    def __init__(self):
        self.images = {}
        self._gradients = {}
        self.letter_font = pygame.font.SysFont("arial", 32, bold=True)
        self.debug_font = pygame.font.SysFont("consolas", 14)
        DebugLogger.init_entry("DrawManager")

    # ===========================================================
    # Image Loading
    # ===========================================================

    def load_sprite(self, key, paths, size):
        """
        Load the first path in `paths` that exists, scaled to `size`.

        Falls back to a flat placeholder so the game still runs without art.

        Returns:
            pygame.Surface
        """
        if key in self.images:
            return self.images[key]

        image = None
        for path in paths:
            if not os.path.exists(path):
                DebugLogger.warn(f"Sprite not found at {path}, trying next", category="render")
                continue
            try:
                image = pygame.image.load(path).convert_alpha()
            except pygame.error as e:
                DebugLogger.warn(f"Failed to load sprite {path}: {e}", category="render")
                continue
            DebugLogger.action(f"Loaded sprite {path} ({image.get_width()}x{image.get_height()})",
                               category="render")
            break

        if image is None:
            DebugLogger.fail("No sprite could be loaded, using placeholder", category="render")
            image = pygame.Surface(size, pygame.SRCALPHA)
            image.fill(PLACEHOLDER_COLOR)

        image = pygame.transform.smoothscale(image, size)
        self.images[key] = image
        return image

    def _gradient(self, size, top, bottom):
        """Vertical two-stop gradient surface, cached per (size, colors)."""
        key = (size, top, bottom)
        surface = self._gradients.get(key)
        if surface is None:
            width, height = size
            surface = pygame.Surface(size)
            span = max(height - 1, 1)
            for row in range(height):
                t = row / span
                color = [round(a + (b - a) * t) for a, b in zip(top, bottom)]
                pygame.draw.line(surface, color, (0, row), (width - 1, row))
            self._gradients[key] = surface
        return surface

    # ===========================================================
    # Frame Rendering
    # ===========================================================

    def draw_frame(self, surface, world, sprite=None, buttons=(), debug=False):
        """Paint one full frame of `world` onto `surface`."""
        self.draw_background(surface)

        camera = world.camera
        for platform in world.platforms:
            self.draw_ground(surface, platform, camera)
        for platform in world.letter_platforms:
            self.draw_letter_block(surface, platform, camera)

        self.draw_body(surface, world.body, camera, sprite)

        for button in buttons:
            self.draw_button(surface, button)
        if debug:
            self.draw_debug_overlay(surface, world.body)

    def draw_background(self, surface):
        size = surface.get_size()
        surface.blit(self._gradient(size, SKY_TOP, SKY_BOTTOM), (0, 0))

        clouds = pygame.Surface(size, pygame.SRCALPHA)
        for cloud in CLOUDS:
            for x, y, radius in cloud:
                pygame.draw.circle(clouds, CLOUD_COLOR, (x, y), radius)
        surface.blit(clouds, (0, 0))

    def draw_ground(self, surface, platform, camera):
        x, y = camera.to_screen(platform.x, platform.y)
        rect = pygame.Rect(round(x), round(y) + GROUND_DRAW_OFFSET, platform.width, platform.height)
        if not rect.colliderect(surface.get_rect()):
            return

        visible = rect.clip(surface.get_rect())
        surface.blit(self._gradient(visible.size, GROUND_TOP, GROUND_BOTTOM), visible.topleft)
        pygame.draw.rect(surface, GROUND_EDGE, rect, 2)

        start = rect.left + max(0, (visible.left - rect.left) // GROUND_TILE * GROUND_TILE)
        for tile_x in range(start, visible.right, GROUND_TILE):
            pygame.draw.line(surface, GROUND_EDGE, (tile_x, rect.top), (tile_x, rect.bottom - 1))

    def draw_letter_block(self, surface, platform, camera):
        x, y = camera.to_screen(platform.x, platform.y)
        rect = pygame.Rect(round(x), round(y), platform.width, platform.height)

        if rect.colliderect(surface.get_rect()):
            if platform.is_colliding:
                fill = self._gradient(rect.size, BLOCK_HIT_TOP, BLOCK_HIT_BOTTOM)
            else:
                fill = self._gradient(rect.size, BLOCK_TOP, BLOCK_BOTTOM)
            surface.blit(fill, rect.topleft)
            pygame.draw.rect(surface, BLOCK_EDGE, rect, 2)

            shadow = self.letter_font.render(platform.letter, True, (0, 0, 0))
            shadow.set_alpha(128)
            text = self.letter_font.render(platform.letter, True, (255, 255, 255))
            surface.blit(shadow, shadow.get_rect(center=(rect.centerx + 2, rect.centery + 2)))
            surface.blit(text, text.get_rect(center=rect.center))

        platform.clear_highlight()

    def draw_body(self, surface, body, camera, sprite=None):
        x, y = camera.to_screen(body.x, body.y)
        size = (int(body.width), int(body.height) + SPRITE_EXTRA_HEIGHT)

        if sprite is None:
            pygame.draw.rect(surface, PLACEHOLDER_COLOR, pygame.Rect((round(x), round(y)), size))
            return

        if not body.facing_right:
            sprite = pygame.transform.flip(sprite, True, False)
        surface.blit(sprite, (round(x), round(y)))

    def draw_button(self, surface, button):
        alpha = 170 if button.pressed else 90
        panel = pygame.Surface(button.rect.size, pygame.SRCALPHA)
        pygame.draw.rect(panel, (0, 0, 0, alpha), panel.get_rect(), border_radius=12)
        label = self.letter_font.render(button.label, True, (255, 255, 255))
        panel.blit(label, label.get_rect(center=panel.get_rect().center))
        surface.blit(panel, button.rect.topleft)

    def draw_debug_overlay(self, surface, body):
        lines = (
            f"Position: ({round(body.x)}, {round(body.y)})",
            f"Velocity: ({body.velocity_x:.1f}, {body.velocity_y:.1f})",
            f"Grounded: {body.is_grounded}",
            f"Animation: {body.animator.current.value}",
            f"Direction: {'Right' if body.facing_right else 'Left'}",
        )
        panel = pygame.Surface((350, 120), pygame.SRCALPHA)
        panel.fill((0, 0, 0, 77))
        for i, line in enumerate(lines):
            panel.blit(self.debug_font.render(line, True, (255, 255, 255)), (10, 8 + i * 20))
        surface.blit(panel, (10, 10))
