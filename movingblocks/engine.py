# movingblocks/engine.py
# -*- coding: utf-8 -*-
"""
Главный цикл.

* Создаёт окно, сцену (из конфига, если корень не передан) и рендерер.
* Каждый тик: advance всего дерева, probe по последней позиции курсора,
  перерисовка по сигналу сцены.
* F9 – показ FPS, F10 – V‑Sync, Esc – выход.
"""
import time
import glfw
from movingblocks.core.timer import Timer
from movingblocks.scene import Scene, generate_random_blocks
from movingblocks.utils import logger, Config, FPSCounter, Profiler


class Engine:
    """
    Главный цикл.
    """
    # -----------------------------------------------------------------
    def __init__(
        self,
        root=None,
        width: int = 1280,
        height: int = 720,
        title: str = "Moving Blocks",
        config_path: str = "config.json",
    ):
        # ---------------------------------------------------------
        # Конфиг + окно
        # ---------------------------------------------------------
        self.cfg = Config(config_path)
        win_cfg = self.cfg["window"]
        self.window = self._create_window(
            win_cfg.get("width", width),
            win_cfg.get("height", height),
            win_cfg.get("title", title),
        )

        # ---------------------------------------------------------
        # Сцена
        # ---------------------------------------------------------
        if root is None:
            tree_cfg = self.cfg["tree"]
            root = generate_random_blocks(
                tree_cfg.get("depth", 4),
                tree_cfg.get("children_per_block", 4),
                seed=tree_cfg.get("seed"),
            )
        self.scene = Scene(root)
        self._dirty = True
        self.scene.add_listener(self._on_scene_changed)

        # ---------------------------------------------------------
        # Рендер
        # ---------------------------------------------------------
        self.renderer = self._create_renderer()
        self.window.add_resize_listener(self.renderer.resize)

        # ---------------------------------------------------------
        # V‑Sync, таймер, FPS‑counter
        # ---------------------------------------------------------
        self.set_vsync(bool(self.cfg.get("v_sync", True)))

        self.timer = Timer()
        self.fps_counter = FPSCounter()
        self.update_profiler = Profiler("scene.update")
        self._last_fps_print = time.time()
        self.show_fps = bool(self.cfg.get("show_fps", True))
        self._key_state = {}

    # -----------------------------------------------------------------
    def _create_window(self, w: int, h: int, title: str):
        from movingblocks.window import Window
        return Window(w, h, title)

    def _create_renderer(self):
        from movingblocks.renderer.gl_renderer import GLRenderer
        return GLRenderer(
            self.window,
            show_labels=bool(self.cfg.get("show_labels", True)),
            background=self.cfg["background"],
        )

    # -----------------------------------------------------------------
    def _on_scene_changed(self, _scene):
        self._dirty = True

    # -----------------------------------------------------------------
    def set_vsync(self, enable: bool = True):
        """Переключить V‑Sync и сохранить настройку в конфиге."""
        self.window.set_vsync(enable)
        self.cfg["v_sync"] = enable
        logger.info(f"[Engine] V‑Sync {'ON' if enable else 'OFF'}")

    # -----------------------------------------------------------------
    def step(self, dt: float) -> bool:
        """Один кадр после poll_events. Возвращает True, если был рендер."""
        with self.update_profiler:
            self.scene.update(dt, self.window.input.pointer)

        if not self._dirty:
            return False
        self.renderer.render(self.scene)
        self._dirty = False
        return True

    def run(self):
        """Главный цикл."""
        logger.info("[Engine] Engine started")
        while not self.window.should_close():
            dt = self.timer.tick()
            self.fps_counter.tick()
            self.window.poll_events()

            if self.window.input.is_key_pressed(glfw.KEY_ESCAPE):
                self.window.close()
            self._handle_toggle_key(glfw.KEY_F9, "show_fps", "FPS display")
            self._handle_toggle_key(glfw.KEY_F10, "v_sync", "V‑Sync")

            if self.step(dt):
                self.window.swap_buffers()

            if self.show_fps:
                now = time.time()
                if now - self._last_fps_print >= 1.0:
                    logger.info(f"[Engine] FPS: {self.fps_counter.fps:.2f} | "
                                f"{self.update_profiler.summary()}")
                    self.update_profiler.reset()
                    self._last_fps_print = now

        self.shutdown()

    # -----------------------------------------------------------------
    def _handle_toggle_key(self, glfw_key, cfg_name, description):
        im = self.window.input
        pressed = im.is_key_pressed(glfw_key)
        prev = self._key_state.get(glfw_key, False)

        if pressed and not prev:
            cur = bool(self.cfg.get(cfg_name, False))

            if cfg_name == "v_sync":
                self.set_vsync(not cur)
            else:
                self.cfg[cfg_name] = not cur
                if cfg_name == "show_fps":
                    self.show_fps = not cur

            logger.info(
                f"[Engine] {description} {'ON' if not cur else 'OFF'}"
            )
        self._key_state[glfw_key] = pressed

    # -----------------------------------------------------------------
    def shutdown(self):
        """Освободить ресурсы и закрыть окно."""
        logger.info(f"[Engine] Shutting down after {self.scene.frame} frames")
        self.window.close()
        if hasattr(self.window, "destroy"):
            self.window.destroy()
