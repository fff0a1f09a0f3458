from pydantic import BaseModel


class Token(BaseModel):
    token: str


class Message(BaseModel):
    message: str
