#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Демо: случайное дерево блоков, наведение курсора подсвечивает блоки.

    python examples/moving_blocks.py [depth] [children_per_block] [seed]
"""

import sys

from movingblocks import generate_random_blocks
from movingblocks.engine import Engine
from movingblocks.utils import logger


def main(argv):
    root = None
    if len(argv) >= 2:
        depth = int(argv[0])
        per_block = int(argv[1])
        seed = int(argv[2]) if len(argv) >= 3 else None
        root = generate_random_blocks(depth, per_block, seed=seed)

    logger.info("Starting moving blocks...")
    engine = Engine(root=root)
    engine.run()


if __name__ == "__main__":
    main(sys.argv[1:])
