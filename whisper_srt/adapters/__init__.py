"""Input adapters: external transcript formats to IR segments."""

from whisper_srt.adapters.whisper_json import load_transcript, loads_transcript, parse_transcript

__all__ = ["load_transcript", "loads_transcript", "parse_transcript"]
