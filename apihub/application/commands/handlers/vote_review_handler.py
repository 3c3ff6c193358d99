"""VoteReview command handler."""

from apihub.application.commands.review_commands import VoteReview
from apihub.application.dtos import ReviewResult
from apihub.core.result import Failure, Result, Success
from apihub.domain.protocols.logger_protocol import LoggerProtocol
from apihub.domain.protocols.review_repository import ReviewRepository
from apihub.domain.protocols.user_repository import UserRepository


class VoteReviewError:
    """VoteReview-specific errors."""

    REVIEW_NOT_FOUND = "Review not found"


class VoteReviewHandler:
    """Handler for VoteReview command.

    The counter change is a single atomic UPDATE in the repository; it
    is not clamped and may go negative.
    """

    def __init__(
        self,
        review_repo: ReviewRepository,
        user_repo: UserRepository,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            review_repo: Review repository.
            user_repo: User repository.
            logger: Logger.
        """
        self._review_repo = review_repo
        self._user_repo = user_repo
        self._logger = logger

    async def handle(self, cmd: VoteReview) -> Result[ReviewResult, str]:
        """Handle VoteReview command.

        Args:
            cmd: Review id and vote direction.

        Returns:
            Success(ReviewResult): Review with updated helpful_count.
            Failure(error): Review does not exist.
        """
        review = await self._review_repo.apply_vote(cmd.review_id, cmd.direction.delta)
        if review is None:
            return Failure(error=VoteReviewError.REVIEW_NOT_FOUND)

        self._logger.info(
            "review_voted",
            review_id=str(review.id),
            direction=cmd.direction.value,
            helpful_count=review.helpful_count,
        )

        author = await self._user_repo.find_by_id(review.user_id)
        return Success(value=ReviewResult.from_entity(review, author))
