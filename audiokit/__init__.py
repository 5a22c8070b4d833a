"""Audio signal tools: FFT, spectrum analysis, spectrogram files, synthesis and sample packing."""

__version__ = "0.1.0"

__all__ = [
    "fft",
    "specfile",
    "spectrum",
    "synth",
    "tone",
    "voip",
]