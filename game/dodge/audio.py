"""
Synthesized sound effects (no audio files needed)
"""

from pyglet.media import synthesis


class PygletTone:
    """Plays short sine beeps through pyglet, the audio backend Arcade uses"""

    def play_tone(self, frequency: float, duration: float, volume: float) -> None:
        envelope = synthesis.LinearDecayEnvelope(peak=volume)
        source = synthesis.Sine(duration, frequency=frequency, envelope=envelope)
        source.play()
