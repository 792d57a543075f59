"""
Генератор случайного дерева блоков (демо и тестовые данные).
"""

from math import degrees
from typing import Optional

import numpy as np

from movingblocks.math.mat4 import Mat4
from movingblocks.math.rect import Size
from movingblocks.math.vec2 import Vec2
from movingblocks.scene.block import Block

BLOCK_SIZE = (100.0, 100.0)
BLOCK_OFFSET = (100.0, 100.0)
DEPTH_SKEW = 0.001          # элемент (3, 2)
MAX_STEP = 0.1              # смещение за тик
MAX_TURN = 0.001            # поворот за тик, радианы


def random_delta_transform(rng: np.random.Generator) -> Mat4:
    """Δ = P · T · R: скос по глубине, затем сдвиг, затем поворот."""
    skew = Mat4.identity().with_entry(3, 2, DEPTH_SKEW)
    step = Mat4.translate(rng.random() * MAX_STEP, rng.random() * MAX_STEP)
    turn = Mat4.rotate_z(degrees((rng.random() - 0.5) * MAX_TURN))
    return skew @ step @ turn


def random_color(rng: np.random.Generator):
    r, g, b = (int(c) for c in rng.integers(0, 256, size=3))
    return (r, g, b, 255)


def generate_random_blocks(depth: int,
                           children_per_block: int,
                           rng: Optional[np.random.Generator] = None,
                           seed: Optional[int] = None) -> Block:
    """
    Дерево высоты `depth`: у каждого внутреннего узла
    `children_per_block` детей, depth == 0 – лист.
    """
    if depth < 0 or children_per_block < 0:
        raise ValueError("depth and children_per_block must be non-negative")
    if rng is None:
        rng = np.random.default_rng(seed)

    block = Block(
        Size(*BLOCK_SIZE),
        Vec2(*BLOCK_OFFSET),
        random_color(rng),
        random_delta_transform(rng),
    )
    if depth > 0:
        for _ in range(children_per_block):
            block.add_child(generate_random_blocks(depth - 1, children_per_block, rng))
    return block
