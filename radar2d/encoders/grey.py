# radar2d/encoders/grey.py
import numpy as np
from .base import Encoder
from ..registry import register

@register("enc", "grey")
class Grey(Encoder):
    def encode(self, echo):
        return np.asarray(echo, dtype=np.uint8)
