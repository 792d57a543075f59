# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры: изолированный Config и маленькие деревья.
"""

import pytest

from movingblocks.math import Mat4, Size, Vec2
from movingblocks.scene import Block, Scene
from movingblocks.utils.config import Config


def make_block(offset=(0.0, 0.0), size=(10.0, 10.0), delta=None, children=()):
    return Block(
        Size(*size),
        Vec2(*offset),
        (255, 0, 0, 255),
        delta if delta is not None else Mat4.identity(),
        children,
    )


@pytest.fixture
def config_path(tmp_path):
    """Каждый тест получает собственный config.json (Config – синглтон)."""
    Config._instance = None
    yield tmp_path / "config.json"
    Config._instance = None


@pytest.fixture
def nested_scene():
    """Родитель сдвигается на +10 по X за тик, ребёнок 10×10 в (5, 5)."""
    child = make_block(offset=(5.0, 5.0))
    parent = make_block(size=(1000.0, 1000.0),
                        delta=Mat4.translate(10.0, 0.0),
                        children=[child])
    return Scene(parent)
