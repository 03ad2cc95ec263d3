import os
from dotenv import load_dotenv


class Config:
    load_dotenv()

    DEBUG = os.getenv("DEBUG", "true").lower() == "true"
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")

    # iTunes Search
    ITUNES_SEARCH_URL = os.getenv("ITUNES_SEARCH_URL", "https://itunes.apple.com/search")

    # Transporte HTTP (el controlador no configura timeout propio)
    ITUNES_TIMEOUT = float(os.getenv("ITUNES_TIMEOUT", "15"))
    ITUNES_MAX_WORKERS = int(os.getenv("ITUNES_MAX_WORKERS", "4"))

    # Tiempo máximo que la ruta /search espera el resultado
    SEARCH_WAIT_SECONDS = float(os.getenv("SEARCH_WAIT_SECONDS", "30"))
