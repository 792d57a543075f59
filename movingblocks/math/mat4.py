# movingblocks/math/mat4.py
import numpy as np
from math import radians, sin, cos

from movingblocks.math.vec2 import Vec2


class DegenerateTransformError(ValueError):
    """Матрицу нельзя обратить (или точка уходит в бесконечность при делении на w)."""


class Mat4:
    """
    Аффинно‑проективная матрица 4×4 (float64, row‑major, столбцовые векторы).

    Все операции возвращают новый объект – исходная матрица не меняется.
    """
    __slots__ = ("m",)

    def __init__(self, array: np.ndarray = None):
        if array is None:
            self.m = np.identity(4, dtype=np.float64)
        else:
            self.m = np.array(array, dtype=np.float64).reshape((4, 4))
        # матрица неизменяема
        self.m.flags.writeable = False

    @staticmethod
    def identity():
        return Mat4(np.identity(4, dtype=np.float64))

    @staticmethod
    def translate(x: float, y: float, z: float = 0.0):
        m = np.identity(4, dtype=np.float64)
        m[0, 3] = x
        m[1, 3] = y
        m[2, 3] = z
        return Mat4(m)

    @staticmethod
    def scale(sx: float, sy: float, sz: float = 1.0):
        m = np.identity(4, dtype=np.float64)
        m[0, 0] = sx
        m[1, 1] = sy
        m[2, 2] = sz
        return Mat4(m)

    @staticmethod
    def rotate_z(angle_deg: float):
        a = radians(angle_deg)
        c, s = cos(a), sin(a)
        m = np.identity(4, dtype=np.float64)
        m[0, 0] = c
        m[0, 1] = -s
        m[1, 0] = s
        m[1, 1] = c
        return Mat4(m)

    def with_entry(self, row: int, col: int, value: float) -> "Mat4":
        """Копия с заменённым элементом (например, (3, 2) – «перспективный» скос по глубине)."""
        m = self.m.copy()
        m[row, col] = value
        return Mat4(m)

    def __matmul__(self, other: "Mat4") -> "Mat4":
        return Mat4(np.dot(self.m, other.m))

    def __pow__(self, n: int) -> "Mat4":
        """n‑кратная композиция self @ self @ ... (n = 0 → единичная)."""
        return Mat4(np.linalg.matrix_power(self.m, n))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Mat4):
            return NotImplemented
        return bool(np.array_equal(self.m, other.m))

    __hash__ = None

    def is_close(self, other: "Mat4", atol: float = 1e-9) -> bool:
        return bool(np.allclose(self.m, other.m, rtol=1e-9, atol=atol))

    def determinant(self) -> float:
        return float(np.linalg.det(self.m))

    def is_invertible(self) -> bool:
        if not np.all(np.isfinite(self.m)):
            return False
        return self.determinant() != 0.0

    def inverted(self) -> "Mat4":
        """Обратная матрица; DegenerateTransformError для вырожденной."""
        if not self.is_invertible():
            raise DegenerateTransformError(
                f"Matrix is not invertible (det={self.determinant():.3e})"
            )
        try:
            inverse = np.linalg.inv(self.m)
        except np.linalg.LinAlgError as exc:
            raise DegenerateTransformError(str(exc)) from exc
        if not np.all(np.isfinite(inverse)):
            raise DegenerateTransformError("Inverse matrix is not finite")
        return Mat4(inverse)

    def transform_point(self, point: Vec2) -> Vec2:
        """
        Отобразить 2‑D точку (z = 0) с делением на w.
        Возвращает Vec2; при w = 0 – DegenerateTransformError.
        """
        v = self.m @ np.array([point.x, point.y, 0.0, 1.0], dtype=np.float64)
        w = v[3]
        if w == 0.0 or not np.isfinite(w):
            raise DegenerateTransformError(f"Point maps to infinity (w={w})")
        return Vec2(v[0] / w, v[1] / w)

    def __repr__(self):
        return f"Mat4({self.m})"

    def to_np(self) -> np.ndarray:
        return self.m.copy()

    def to_gl(self) -> np.ndarray:
        """Транспонируем для передачи в OpenGL (столбцы‑массив)."""
        return self.m.T.copy()
