from typing import TYPE_CHECKING, Any, TypeAlias

import numpy as np

from ..exceptions import InvalidValue

if TYPE_CHECKING:
    import numpy.typing as npt

    Vector3: TypeAlias = npt.NDArray[np.float64]
    Matrix4: TypeAlias = npt.NDArray[np.float64]
else:
    Vector3: TypeAlias = np.ndarray
    Matrix4: TypeAlias = np.ndarray

VECTOR3_SHAPE = (3,)
MATRIX4_SHAPE = (4, 4)


def _as_array(value: Any, shape: tuple[int, ...], name: str) -> np.ndarray:
    try:
        array = np.array(value, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidValue(f"{name} must be numeric, got {value!r}") from e
    if array.shape != shape:
        if array.size == int(np.prod(shape)):
            array = array.reshape(shape)
        else:
            raise InvalidValue(
                f"{name} must have shape {shape}, got {array.shape}"
            )
    return array


def as_vector3(value: Any, *, name: str = "vector") -> Vector3:
    return _as_array(value, VECTOR3_SHAPE, name)


def as_matrix4(value: Any, *, name: str = "matrix") -> Matrix4:
    return _as_array(value, MATRIX4_SHAPE, name)


def as_float(value: Any, *, name: str = "value") -> float:
    if isinstance(value, bool):
        raise InvalidValue(f"{name} must be numeric, got bool")
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise InvalidValue(f"{name} must be numeric, got {value!r}") from e


def as_text(value: Any, *, name: str = "value") -> str:
    if not isinstance(value, str):
        raise InvalidValue(f"{name} must be a string, got {type(value).__name__}")
    return value


def zero_vector() -> Vector3:
    return np.zeros(VECTOR3_SHAPE, dtype=np.float64)


def unit_y() -> Vector3:
    return np.array((0.0, 1.0, 0.0), dtype=np.float64)


def identity_matrix() -> Matrix4:
    return np.identity(4, dtype=np.float64)
