"""
Wire schemas for the movie server JSON API.

Every list field is optional on the wire: the server omits ``movies``
entirely when nothing matches.
"""
from typing import List, Optional
from pydantic import BaseModel, Field

from .models import CandidateMovie, Movie


class MoviePayload(BaseModel):
    title: str
    status: str

    def to_model(self) -> Movie:
        return Movie(title=self.title, status=self.status)


class ListMoviesPayload(BaseModel):
    movies: Optional[List[MoviePayload]] = None


class SearchMoviePayload(BaseModel):
    imdb: Optional[str] = None
    titles: List[str] = Field(min_length=1)
    year: Optional[int] = None

    def to_model(self) -> CandidateMovie:
        return CandidateMovie(titles=self.titles, external_id=self.imdb, year=self.year)


class SearchPayload(BaseModel):
    movies: Optional[List[SearchMoviePayload]] = None


class AddMoviePayload(BaseModel):
    success: bool
