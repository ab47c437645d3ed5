# radar2d/encoders/base.py
class Encoder:
    def encode(self, echo):
        """
        echo: (M,) uint8 sample intensities
        Returns: (M,) uint8 grey levels written to the canvas
        """
        raise NotImplementedError
