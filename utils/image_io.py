"""
Image I/O utilities for the line-analysis demo.

This module provides:
    • ensure_output_dir(path)
    • save_image(path, image)
    • load_image(path)

Handles all filesystem interaction in a consistent, testable way.
"""

import os

import cv2
import numpy as np


# -------------------------------------------------------------------------
#  OUTPUT DIRECTORY HANDLING
# -------------------------------------------------------------------------

def ensure_output_dir(path: str):
    """
    Ensures that an output directory exists.
    """
    if path and not os.path.exists(path):
        os.makedirs(path, exist_ok=True)


# -------------------------------------------------------------------------
#  IMAGE SAVING / LOADING
# -------------------------------------------------------------------------

def save_image(path: str, image: np.ndarray):
    """
    Save an image to disk, ensuring the directory exists.
    Raises IOError when OpenCV refuses to write the file.
    """
    ensure_output_dir(os.path.dirname(path))
    if not cv2.imwrite(path, image):
        raise IOError(f"Could not write image: {path}")


def load_image(path: str, grayscale: bool = False) -> np.ndarray:
    """
    Reads an image written by save_image(). Raises IOError if unreadable.
    """
    flag = cv2.IMREAD_GRAYSCALE if grayscale else cv2.IMREAD_COLOR
    img = cv2.imread(path, flag)
    if img is None:
        raise IOError(f"Could not read image: {path}")
    return img
