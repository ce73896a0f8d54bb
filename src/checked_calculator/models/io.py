"""Input/output models for the user-facing interfaces."""

from pydantic import BaseModel, Field


class WelcomeMessage(BaseModel):
    """Message shown when the CLI is started without a command."""

    message: str = Field(
        default="Welcome to Checked Calculator!",
        description="Greeting displayed to the user",
    )
    hint: str = Field(
        default="Type --help for more information",
        description="Hint on how to discover the available commands",
    )
