from pydantic import BaseModel


class NoteOut(BaseModel):
    id: int
    title: str
    content: str
    createdAt: str
    updatedAt: str


class HealthOut(BaseModel):
    status: str
    message: str
    timestamp: str
    environment: str


class ErrorOut(BaseModel):
    message: str
