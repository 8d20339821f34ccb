from pydantic import BaseModel, ConfigDict


class LanguageInfo(BaseModel):
    """Display information for a supported language"""
    model_config = ConfigDict(frozen=True)

    # pt, en, kriol, ...
    code: str

    # Português, English, Crioulo da Guiné-Bissau
    name: str

    # 🇧🇷, 🇬🇼
    flag: str

    # Português, Kriol
    native: str

    def __repr__(self):
        return f'<LanguageInfo {self.code} - {self.name}>'
