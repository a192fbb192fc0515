"""Data models for linguistic sort upper-case expressions."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from upper_table.casing import hex_code_point, locale_upper


class LocaleExpression(BaseModel):
    """One Oracle linguistic sort and the language it is compared against."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        pattern=r"^[A-Z][A-Z0-9_]*$", description="Enum member name, e.g. GERMAN"
    )
    expression: str = Field(
        description="PL/SQL upper-case expression with one %s for the input string"
    )
    language: str = Field(
        pattern=r"^[a-z]{2,3}$", description="ISO 639 code used for the application side"
    )

    @field_validator("expression")
    @classmethod
    def _check_expression(cls, value: str) -> str:
        if value.count("%s") != 1 or value.replace("%s", "").count("%") != 0:
            raise ValueError(f"Expression must contain exactly one %s placeholder: {value}")
        if '"' in value or "\\" in value:
            raise ValueError(f"Expression must not contain double quotes or backslashes: {value}")
        return value

    def sql(self, value: str) -> str:
        """Apply the expression to a PL/SQL string expression."""
        return self.expression % value

    def probe_sql(self, char: str) -> str:
        """Apply the expression to a ``unistr`` literal of ``char``."""
        return self.sql(f"unistr('\\{hex_code_point(char)}')")

    def expected_upper(self, char: str) -> str:
        """Upper-case ``char`` the way the application does for this language."""
        return locale_upper(char, self.language)
