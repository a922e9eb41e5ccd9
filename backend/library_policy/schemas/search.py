"""
Schemas Pydantic para busca global.
"""

from pydantic import Field

from library_policy.schemas.base import BaseSchema
from library_policy.schemas.book import BookRecord
from library_policy.schemas.loan import LoanRecord
from library_policy.schemas.member import MemberProfile


class SearchResults(BaseSchema):
    books: list[BookRecord] = Field(default_factory=list)
    members: list[MemberProfile] = Field(default_factory=list)
    loans: list[LoanRecord] = Field(default_factory=list)
