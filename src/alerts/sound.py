"""Sounddevice-backed completion sound playback."""

from __future__ import annotations

import logging
import wave
from typing import Optional

import numpy as np

from .errors import SoundError

DEFAULT_SAMPLE_RATE_HZ = 44100
CHIME_FREQUENCIES_HZ = (880.0, 1320.0)
CHIME_TONE_SECONDS = 0.18


def load_wav(path: str) -> tuple[np.ndarray, int]:
    """Read a PCM WAV file into a mono float32 array in [-1, 1]."""
    try:
        with wave.open(path, "rb") as wav_file:
            channels = wav_file.getnchannels()
            sample_width = wav_file.getsampwidth()
            sample_rate_hz = wav_file.getframerate()
            frames = wav_file.readframes(wav_file.getnframes())
    except (OSError, wave.Error, EOFError) as error:
        raise SoundError(f"Failed to read sound file {path}: {error}") from error

    if sample_width == 1:
        pcm = (np.frombuffer(frames, dtype=np.uint8).astype(np.float32) - 128.0) / 128.0
    elif sample_width == 2:
        pcm = np.frombuffer(frames, dtype=np.int16).astype(np.float32) / 32768.0
    elif sample_width == 4:
        pcm = np.frombuffer(frames, dtype=np.int32).astype(np.float32) / 2147483648.0
    else:
        raise SoundError(f"Unsupported WAV sample width: {sample_width * 8} bit")

    if channels > 1:
        pcm = pcm.reshape(-1, channels).mean(axis=1)
    if pcm.size == 0:
        raise SoundError(f"Sound file is empty: {path}")
    return pcm.astype(np.float32), sample_rate_hz


def synthesize_chime(sample_rate_hz: int = DEFAULT_SAMPLE_RATE_HZ) -> np.ndarray:
    """Two short rising tones with a linear fade on each end."""
    samples_per_tone = int(sample_rate_hz * CHIME_TONE_SECONDS)
    t = np.arange(samples_per_tone, dtype=np.float32) / sample_rate_hz

    fade = min(samples_per_tone // 4, int(sample_rate_hz * 0.02))
    envelope = np.ones(samples_per_tone, dtype=np.float32)
    if fade > 0:
        ramp = np.linspace(0.0, 1.0, fade, dtype=np.float32)
        envelope[:fade] = ramp
        envelope[-fade:] = ramp[::-1]

    tones = [np.sin(2 * np.pi * freq * t) * envelope for freq in CHIME_FREQUENCIES_HZ]
    return np.concatenate(tones).astype(np.float32)


def _load_sounddevice():
    try:
        import sounddevice as sd
    except (ImportError, OSError) as error:
        # sounddevice raises OSError when the PortAudio library is missing.
        raise SoundError(
            f"Audio backend unavailable ({error}). Install sounddevice and PortAudio."
        ) from error
    return sd


class SoundPlayer:
    """Plays the completion sound without blocking the caller.

    The audio backend is loaded on construction; a missing backend raises
    `SoundError` so callers can run without sound.
    """

    def __init__(
        self,
        sound_file: Optional[str] = None,
        output_device_index: Optional[int] = None,
        volume: float = 0.6,
        logger: Optional[logging.Logger] = None,
    ):
        self._sound_file = sound_file
        self._output_device_index = output_device_index
        self._volume = volume
        self._logger = logger or logging.getLogger("alerts.sound")
        self._cached: Optional[tuple[np.ndarray, int]] = None
        self._sd = _load_sounddevice()

    def samples(self) -> tuple[np.ndarray, int]:
        if self._cached is None:
            if self._sound_file:
                wav, sample_rate_hz = load_wav(self._sound_file)
            else:
                sample_rate_hz = DEFAULT_SAMPLE_RATE_HZ
                wav = synthesize_chime(sample_rate_hz)
            self._cached = (wav * self._volume, sample_rate_hz)
        return self._cached

    def play(self) -> None:
        wav, sample_rate_hz = self.samples()
        self._logger.debug(
            "Playing %d samples of completion sound at %d Hz",
            len(wav),
            sample_rate_hz,
        )
        try:
            self._sd.play(
                wav,
                samplerate=sample_rate_hz,
                device=self._output_device_index,
                blocking=False,
            )
        except Exception as error:
            raise SoundError(f"Audio playback failed: {error}") from error
