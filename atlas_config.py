# atlas_config.py
import os
from dotenv import load_dotenv

load_dotenv()

# --- Environment settings ---
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")
GEMINI_TEMPERATURE = 0.7
ATLAS_LOCALE = os.getenv("ATLAS_LOCALE", "ne")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
# Oldest sessions are evicted beyond this many
MAX_ASSISTANT_SESSIONS = int(os.getenv("MAX_ASSISTANT_SESSIONS", "500"))

# No trailing slashes: flask-cors compares origins literally
ALLOWED_ORIGINS = [
    origin.strip().rstrip("/")
    for origin in os.getenv(
        "ALLOWED_ORIGINS",
        "http://localhost:3000,http://127.0.0.1:3000,http://localhost:5173",
    ).split(",")
    if origin.strip()
]

# --- Map defaults (Leaflet) ---
MAP_CENTER = [28.3949, 84.1240]
MAP_ZOOM = 7
TILE_URL = "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"
TILE_ATTRIBUTION = '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> contributors'

PROJECT_KNOWLEDGE = {
    "project_name": "नेपाल शैक्षिक GIS",
    "version": "1.1",
    "description": "कक्षा १० सामाजिक अध्ययनका लागि नेपालको भूगोलको अन्तरक्रियात्मक डिजिटल नक्सा।",
    "topics": ["प्रदेश", "हिमाल", "नदी", "ताल", "राष्ट्रिय निकुञ्ज", "राजमार्ग"],
}

SYSTEM_INSTRUCTION = (
    "तपाईं नेपालको भूगोलका विशेषज्ञ हुनुहुन्छ। "
    "१५ वर्षका विद्यार्थीहरूका लागि उपयुक्त सरल नेपाली भाषा प्रयोग गर्नुहोस्।"
)


def generate_user_prompt(question):
    """Wraps the student's question in the class 10 tutor framing."""
    return f"""तपाईं नेपालको कक्षा १० का विद्यार्थीहरूका लागि एक सहयोगी भूगोल सहायक हुनुहुन्छ।
नेपालको भूगोल, {', '.join(PROJECT_KNOWLEDGE['topics'])}का बारेमा सोधिएका प्रश्नहरूको उत्तर दिनुहोस्।
उत्तरहरू संक्षिप्त, शैक्षिक र नेपाली भाषामा हुनुपर्छ।
प्रयोगकर्ताले सोध्छन्: {question}"""
