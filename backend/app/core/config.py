import os

class Config:
    PROJECT_NAME = "Users Service"
    ALLOW_ORIGINS = os.getenv("ALLOW_ORIGINS", "*").split(",")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    HOST = os.getenv("HOST", "127.0.0.1")
    PORT = int(os.getenv("PORT", "8000"))
    DEBUG = os.getenv("DEBUG", "false").lower() in ("true", "1", "t")

settings = Config()
