from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional, Sequence


class ConfigRow(BaseModel):
    """One rendered row of the configuration table"""
    model_config = ConfigDict(frozen=True)

    section: str = Field(default="", description="Configuration section, e.g. core")
    key: str = Field(default="", description="Option name within the section")
    value: str = Field(default="", description="Rendered option value")

    @field_validator('section', 'key', 'value', mode='before')
    @classmethod
    def strip_text(cls, v):
        # textContent is null for some node types
        if v is None:
            return ""
        return str(v).strip()

    @classmethod
    def from_cells(cls, cells: Sequence[Optional[str]]) -> "ConfigRow":
        """Build a row from raw cell texts; cells past the third are ignored"""
        section, key, value = (list(cells) + [None, None, None])[:3]
        return cls(section=section, key=key, value=value)

    def matches(self, section: str, key: str) -> bool:
        """Case-insensitive comparison against a section and key"""
        return self.section.lower() == section.lower() and self.key.lower() == key.lower()


class ConfigOption(BaseModel):
    """Option as served by the stub UI's config API"""
    key: str = Field(..., min_length=1)
    value: str = ""


class ConfigSection(BaseModel):
    """Section as served by the stub UI's config API"""
    name: str = Field(..., min_length=1)
    options: List[ConfigOption] = Field(default_factory=list)


class ConfigResponse(BaseModel):
    """Body of GET /api/v2/config"""
    sections: List[ConfigSection] = Field(default_factory=list)


class LoginForm(BaseModel):
    """Schema for the stub UI login form"""
    username: str = Field(..., max_length=200)
    password: str = Field(..., max_length=200)

    @field_validator('username')
    def username_not_empty(cls, v):
        if not v or not v.strip():
            raise ValueError('Username cannot be empty or whitespace')
        return v.strip()
