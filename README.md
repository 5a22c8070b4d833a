# audiokit

A small, dependency-free toolkit for working with audio samples in Python.

- **`audiokit.fft`**: a radix-2 Cooley–Tukey FFT. `fft(data, inverse=False)`
  transforms a sequence of complex values (the inverse is normalised by the
  length); `fft_real(samples)` transforms real samples. Lengths must be powers
  of two, otherwise `ValueError` is raised.
- **`audiokit.spectrum`**: `FftAnalyzer` collects samples and, each time its
  window fills, returns the magnitudes of the positive-frequency bins of the
  Hann-windowed spectrum. `SpectrogramDisplay` bins those magnitudes into
  terminal columns, log-scales them between `MIN_DB` and `MAX_DB`, keeps a
  scrolling history and renders it as a string of ANSI colour escapes.
  `value_to_rgb` maps a level in 0..1 to a black–purple–white colour, and
  `resample_bins` averages a row to a given width.
- **`audiokit.specfile`**: a compact binary spectrogram format.
  `SpectrogramRecorder` appends timestamped rows; `SpectrogramReader` indexes a
  file and loads rows from disk on demand (`row_count`, `get_timestamp`,
  `get_row`, `total_duration`). Both are context managers.
- **`audiokit.synth`**: an `Oscillator` producing sine, square, saw and
  triangle (`Waveform`) signals from harmonics below the Nyquist frequency,
  plus `waveform_for_elapsed`, a four-second demo schedule of waveforms.
- **`audiokit.tone`**: `sine_source` returns a callable producing successive
  sine samples; `fill_frames` writes one sample per frame into every channel
  of an interleaved buffer.
- **`audiokit.voip`**: helpers for sending audio between peers as mono
  little-endian 32-bit floats: `pack_samples`, `unpack_samples`,
  `first_channel` (take the first channel of interleaved data) and
  `fill_from_buffer` (fill output frames from a `collections.deque`, with
  silence once it runs dry).

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Spectrogram file format

A spectrogram file is a sequence of rows, each stored little-endian as a
`u64` timestamp in microseconds since recording started, a `u16` bin count
and that many `f32` magnitudes. A row holds at most `MAX_BINS` (65535) bins.

```python
from audiokit.specfile import SpectrogramRecorder, SpectrogramReader

with SpectrogramRecorder("spectro.bin") as recorder:
    recorder.write_row(None, [0.1, 0.5, 0.9])   # None stamps the row "now"

with SpectrogramReader("spectro.bin") as reader:
    print(reader.row_count(), reader.get_row(0))
```

## Examples

Compute a magnitude spectrum:

```python
from audiokit.fft import fft_real

spectrum = fft_real([0.0, 1.0, 0.0, -1.0])
magnitudes = [abs(c) for c in spectrum]
```

Feed samples to an analyser and collect spectra as they become ready:

```python
from audiokit.spectrum import FftAnalyzer

analyzer = FftAnalyzer(1024)
for sample in samples:
    magnitudes = analyzer.add_sample(sample)
    if magnitudes is not None:
        ...
```

Map a normalised value to a heat-map colour:

```python
from audiokit.spectrum import value_to_rgb

value_to_rgb(1.0)  # (255, 255, 255)
```

Generate a square wave:

```python
from audiokit.synth import Oscillator, Waveform

osc = Oscillator(sample_rate=48000.0, waveform=Waveform.SQUARE)
samples = [osc.tick() for _ in range(480)]
```

## What this package does not do

- It does not open audio devices: there is no capture or playback. Samples
  come from and go to whatever the caller supplies.
- It has no command-line program and no interactive viewer. Recorded
  spectrogram files can be read with `SpectrogramReader` and drawn with
  `SpectrogramDisplay.render` or `value_to_rgb`, but the terminal handling
  (raw mode, key input, screen size) is left to the caller.
- It does not compress audio or manage network sessions; `audiokit.voip`
  only converts samples to and from raw bytes.