from __future__ import annotations

import math

import numpy as np

from flatray.errors import DegenerateGeometryError
from flatray.utils.tolerance import get_epsilon

TWO_PI: float = 2.0 * math.pi


def vector_length(v: np.ndarray) -> float: #Euclidean length (magnitude) of a 2D vector
    vector_array = np.asarray(v, dtype=float)
    return float(np.linalg.norm(vector_array))


def normalize_vector(v: np.ndarray) -> np.ndarray:
    vector_array = np.asarray(v, dtype=float)
    magnitude = np.linalg.norm(vector_array)
    if magnitude < get_epsilon():
        raise DegenerateGeometryError("Cannot normalize near-zero vector")
    return vector_array / magnitude


def vector_dot(a: np.ndarray, b: np.ndarray) -> float:
    vector_a = np.asarray(a, dtype=float)
    vector_b = np.asarray(b, dtype=float)
    return float(np.dot(vector_a, vector_b))


def vector_cross(a: np.ndarray, b: np.ndarray) -> float:
    """z component of the 3D cross product of two planar vectors.
       Positive when b lies counterclockwise of a"""
    vector_a = np.asarray(a, dtype=float)
    vector_b = np.asarray(b, dtype=float)
    return float(vector_a[0] * vector_b[1] - vector_a[1] * vector_b[0])


def vector_slope(v: np.ndarray) -> float:
    """Angle between the vector and the x axis, in [0, 2*pi)."""
    vector_array = np.asarray(v, dtype=float)
    angle = float(np.arctan2(vector_array[1], vector_array[0]))
    if angle < 0.0:
        angle += TWO_PI
    return angle


def rotate90_cw(v: np.ndarray) -> np.ndarray:
    vector_array = np.asarray(v, dtype=float)
    return np.array([vector_array[1], -vector_array[0]], dtype=float)


def rotate90_ccw(v: np.ndarray) -> np.ndarray:
    vector_array = np.asarray(v, dtype=float)
    return np.array([-vector_array[1], vector_array[0]], dtype=float)
