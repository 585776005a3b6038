"""
Configuration module for SermonClip (configs).
"""

import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    def __init__(self) -> None:
        # Logging / runtime
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        self.log_file = os.getenv("LOG_FILE")
        self.log_dir = os.getenv("LOG_DIR", "logs")
        self.port = int(os.getenv("PORT", "8000"))

        # API keys and providers
        self.openai_api_key = os.getenv("OPENAI_API_KEY")
        # Optional base URL for OpenAI-compatible services
        self.openai_base_url = os.getenv("OPENAI_BASE_URL") or os.getenv(
            "OPENAI_API_BASE"
        )
        self.openai_timeout = float(os.getenv("OPENAI_TIMEOUT", "60"))
        self.openai_retries = int(os.getenv("OPENAI_RETRIES", "3"))
        self.openai_backoff = float(os.getenv("OPENAI_BACKOFF", "0.5"))

        # Google Gemini configuration
        self.google_gemini_api_key = os.getenv("GOOGLE_GEMINI_API_KEY") or os.getenv(
            "API_KEY"
        )
        self.google_gemini_timeout = float(os.getenv("GOOGLE_GEMINI_TIMEOUT", "60"))
        self.google_gemini_retries = int(os.getenv("GOOGLE_GEMINI_RETRIES", "3"))
        self.google_gemini_backoff = float(os.getenv("GOOGLE_GEMINI_BACKOFF", "0.5"))
        self.google_gemini_endpoint = os.getenv("GOOGLE_GEMINI_ENDPOINT")

        # Models, as "provider/model" specs
        self.text_model = os.getenv("TEXT_MODEL", "google/gemini-2.5-flash")
        self.tts_model = os.getenv("TTS_MODEL", "google/gemini-2.5-flash-preview-tts")
        self.video_model = os.getenv(
            "VIDEO_MODEL", "google/veo-3.1-fast-generate-preview"
        )
        self.video_poll_interval = float(os.getenv("VIDEO_POLL_INTERVAL", "4.0"))
        self.video_timeout = float(os.getenv("VIDEO_TIMEOUT", "600"))
        self.tts_voice_male = os.getenv("TTS_VOICE_MALE", "Fenrir")
        self.tts_voice_female = os.getenv("TTS_VOICE_FEMALE", "Aoede")

        # Narration PCM format delivered by the TTS provider
        self.pcm_sample_rate = int(os.getenv("PCM_SAMPLE_RATE", "24000"))
        self.pcm_channels = int(os.getenv("PCM_CHANNELS", "1"))
        self.pcm_bits_per_sample = int(os.getenv("PCM_BITS_PER_SAMPLE", "16"))

        self.max_source_chars = int(os.getenv("MAX_SOURCE_CHARS", "20000"))

        # CORS settings
        self.cors_origins = self._parse_cors_origins(
            os.getenv("CORS_ORIGINS", "http://localhost:3000")
        )

    def _parse_cors_origins(self, origins_str: str) -> list[str]:
        """Parse CORS origins from a comma-separated string."""
        if not origins_str:
            return ["http://localhost:3000"]
        return [origin.strip() for origin in origins_str.split(",") if origin.strip()]


config = Config()
