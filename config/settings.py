"""Application configuration settings."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

PROJECT_ROOT = Path(__file__).resolve().parent.parent


@dataclass
class PageConfig:
    """Streamlit page configuration."""

    page_title: str = field(
        default_factory=lambda: os.getenv("CHATVEZ_PAGE_TITLE", "Chatvez")
    )
    page_icon: str = "💬"
    layout: str = "centered"
    initial_sidebar_state: str = "expanded"


@dataclass
class DisclaimerConfig:
    """Static content of the disclaimer panel."""

    title: str = "Charlemos con Chávez"
    body: str = (
        "Ingresa cualquier pregunta en el formulario y la IA Chatvez te "
        "responderá. La pregunta puede ser cualquier cosa, preocupación "
        "personal o una pregunta mundana. Este modelo ha sido entrenado bajo "
        "el método fine-tuning, codificando los distintos discursos de Hugo "
        "Chávez con Whisper, y reentrenando los datasets."
    )
    image_path: Path = field(
        default_factory=lambda: Path(
            os.getenv(
                "CHATVEZ_IMAGE_PATH", str(PROJECT_ROOT / "assets" / "chavez.png")
            )
        )
    )
    image_width: int = 220


@dataclass
class SidebarConfig:
    """Static branding shown in the sidebar."""

    app_name: str = "Chatvez"
    tagline: str = "Conversa con la IA"
    about: str = (
        "Un modelo de lenguaje ajustado con discursos transcritos. "
        "Las respuestas son generadas y pueden contener errores."
    )


@dataclass
class InputConfig:
    """Chat input row."""

    placeholder: str = "Escribe tu pregunta..."
    send_label: str = "S"
    input_key: str = "chat_input"
    send_key: str = "send_button"


@dataclass
class LoggingConfig:
    """Log level and file destination."""

    level: str = field(default_factory=lambda: os.getenv("CHATVEZ_LOG_LEVEL", "INFO"))
    log_dir: Path = field(
        default_factory=lambda: Path(
            os.getenv("CHATVEZ_LOG_DIR", str(PROJECT_ROOT / "logs"))
        )
    )
    log_file: str = "chatvez.log"


@dataclass
class Settings:
    """Main application settings."""

    page: PageConfig = field(default_factory=PageConfig)
    disclaimer: DisclaimerConfig = field(default_factory=DisclaimerConfig)
    sidebar: SidebarConfig = field(default_factory=SidebarConfig)
    input: InputConfig = field(default_factory=InputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Singleton settings instance
settings = Settings()
