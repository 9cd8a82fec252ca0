import os
from dotenv import load_dotenv

load_dotenv()

# API Keys and Config - loaded from .env
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-5.2")
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")
GEMINI_IMAGE_MODEL = os.getenv("GEMINI_IMAGE_MODEL", "gemini-3-pro-image-preview")

# Outbound HTTP (media downloads)
HTTP_TIMEOUT = int(os.getenv("HTTP_TIMEOUT", "30"))
