from app.repositories.voting.vote import VoteRepository

__all__ = ["VoteRepository"]
