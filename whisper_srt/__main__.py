"""Package entry point for ``python -m whisper_srt``."""

from whisper_srt.cli import main

if __name__ == "__main__":
    main()
