from pydantic import BaseModel


class ShortCodeResponse(BaseModel):
    short_code: str


class CreatorAliasResponse(BaseModel):
    creator_name: str
