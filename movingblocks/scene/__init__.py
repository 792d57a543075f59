"""
Пакет scene – блоки (Block), сцена (Scene) и генератор дерева.
"""

from movingblocks.scene.block import Block
from movingblocks.scene.scene import Scene
from movingblocks.scene.generator import generate_random_blocks

__all__ = ["Block", "Scene", "generate_random_blocks"]
