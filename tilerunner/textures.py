"""Loading images and drawing sprite-sheet regions onto a surface."""

from __future__ import annotations

import enum
import os

import pygame


class TextureError(OSError):
    """Raised when an image cannot be loaded."""


class Flip(enum.IntFlag):
    """How a drawn region is mirrored."""

    NONE = 0
    HORIZONTAL = 1
    VERTICAL = 2


def load_texture(filename: str | os.PathLike) -> pygame.Surface:
    """Load an image file into a surface."""
    try:
        return pygame.image.load(os.fspath(filename))
    except (pygame.error, OSError) as exc:
        raise TextureError(f"Unable to load image {filename}: {exc}") from exc


def draw(surface, texture, src, dest, flip=Flip.NONE) -> None:
    """Copy the ``src`` region of ``texture`` onto ``surface``, stretched to ``dest``."""
    if texture is None:
        return
    src = pygame.Rect(src)
    dest = pygame.Rect(dest)
    region = src.clip(texture.get_rect())
    if region.width <= 0 or region.height <= 0 or dest.width <= 0 or dest.height <= 0:
        return
    image = texture.subsurface(region)
    if image.get_size() != dest.size:
        image = pygame.transform.scale(image, dest.size)
    if flip:
        image = pygame.transform.flip(
            image, bool(flip & Flip.HORIZONTAL), bool(flip & Flip.VERTICAL)
        )
    surface.blit(image, dest.topleft)