from os import getenv
from pydantic import BaseModel
from dotenv import load_dotenv, find_dotenv

# =====================================================
# Cargar .env desde el directorio de trabajo (si existe)
# =====================================================
load_dotenv(find_dotenv(usecwd=True))
# =====================================================

class Settings(BaseModel):
    encoding: str = getenv("WINNERS_ENCODING", "utf-8")
    csv_sep: str = getenv("WINNERS_CSV_SEP", ",")
    csv_column: str = getenv("WINNERS_CSV_COLUMN", "")

    log_level: str = getenv("LOG_LEVEL", "WARNING")

settings = Settings()
