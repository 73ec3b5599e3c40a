import os

def get_settings_module() -> str:
    # Lettura dell'ambiente da APP_ENV, default 'development'
    env = os.getenv("APP_ENV", "development").lower()

    # 1. Production
    if env in {"prod", "production"}:
        return "config.production"
    
    # 2. Testing
    if env in {"test", "testing"}:
        return "config.testing"
    
    # 3. Development for everything else
    return "config.development"


def env_list(name: str) -> list[str]:
    """Comma separated env var as a list ("01-01,01-06" -> ["01-01", "01-06"])."""
    raw = os.getenv(name, "")
    return [v.strip() for v in raw.split(",") if v.strip()]
