# radar2d/encoders/invgrey.py
import numpy as np
from .base import Encoder
from ..registry import register

@register("enc", "invgrey")
class InvGrey(Encoder):
    """Strong returns dark, as on paper plots."""
    def encode(self, echo):
        return (255 - np.asarray(echo, dtype=np.int16)).astype(np.uint8)
