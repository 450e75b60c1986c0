from pydantic import BaseModel


class SupportResponse(BaseModel):
    message: str = ""
    techniques: list[str] = []
    next_steps: list[str] = []
