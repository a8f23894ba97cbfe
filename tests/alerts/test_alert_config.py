import tempfile
import unittest
from pathlib import Path

from alerts.config import AlertConfig
from alerts.errors import AlertConfigurationError
from app_config_schema import AlertSettings


class AlertConfigTests(unittest.TestCase):
    def test_from_settings_uses_builtin_chime_without_file(self) -> None:
        config = AlertConfig.from_settings(AlertSettings(output_device=3, volume=0.5))

        self.assertTrue(config.notifications_enabled)
        self.assertTrue(config.sound_enabled)
        self.assertIsNone(config.sound_file)
        self.assertEqual(3, config.output_device_index)
        self.assertEqual(0.5, config.volume)

    def test_from_settings_rejects_volume_out_of_range(self) -> None:
        with self.assertRaises(AlertConfigurationError):
            AlertConfig.from_settings(AlertSettings(volume=1.5))

    def test_from_settings_rejects_missing_sound_file(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            settings = AlertSettings(sound_file=str(Path(temp_dir) / "bell.wav"))
            with self.assertRaises(AlertConfigurationError):
                AlertConfig.from_settings(settings)

    def test_from_settings_rejects_non_wav_sound_file(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            sound = Path(temp_dir) / "bell.mp3"
            sound.write_bytes(b"ID3")
            with self.assertRaises(AlertConfigurationError):
                AlertConfig.from_settings(AlertSettings(sound_file=str(sound)))

    def test_missing_sound_file_ignored_when_sound_disabled(self) -> None:
        settings = AlertSettings(sound_enabled=False, sound_file="/nowhere/bell.wav")
        config = AlertConfig.from_settings(settings)
        self.assertFalse(config.sound_enabled)


if __name__ == "__main__":
    unittest.main()
