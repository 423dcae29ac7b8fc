from pydantic import BaseModel, ConfigDict


class SearchResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    kw1: str
    kw2: str
    documents: list[str] | None = None  # None = neither keyword is indexed

    @property
    def matched(self) -> bool:
        return self.documents is not None
