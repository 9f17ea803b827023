from typing import List, Optional
from pydantic import BaseModel, Field
from ftskit.schemas.common import BaseResponse


class TokenizerOptions(BaseModel):
    name: str = Field("simple", min_length=1)
    # None means "derive from the options below"; [] means no arguments at all
    arguments: Optional[List[str]] = None
    remove_diacritics: bool = True
    separators: str = ""
    token_characters: str = ""


# Request & Response for /api/tokenize
class TokenizeRequest(BaseModel):
    text: str
    tokenizer: TokenizerOptions = Field(default_factory=TokenizerOptions)


class TokenizerData(BaseModel):
    name: str
    arguments: List[str]


class TokenizedData(BaseModel):
    tokenizer: TokenizerData
    statement: str
    tokens: List[str]
    token_count: int


class TokenizedResponse(BaseResponse):
    data: TokenizedData


# Request & Response for /api/tokenize/statement
class StatementRequest(BaseModel):
    tokenizer: TokenizerOptions = Field(default_factory=TokenizerOptions)


class StatementData(BaseModel):
    tokenizer: TokenizerData
    statement: str


class StatementResponse(BaseResponse):
    data: StatementData
