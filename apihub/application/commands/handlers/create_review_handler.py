"""CreateReview command handler.

Flow:
1. Validate rating range
2. Verify the listing and the author exist
3. Persist the review
4. Return the review with its author summary
"""

from uuid_extensions import uuid7

from apihub.application.commands.review_commands import CreateReview
from apihub.application.dtos import ReviewResult
from apihub.core.result import Failure, Result, Success
from apihub.domain.entities.review import MAX_RATING, MIN_RATING, Review
from apihub.domain.protocols.api_repository import ApiRepository
from apihub.domain.protocols.logger_protocol import LoggerProtocol
from apihub.domain.protocols.review_repository import ReviewRepository
from apihub.domain.protocols.user_repository import UserRepository


class CreateReviewError:
    """CreateReview-specific errors."""

    INVALID_RATING = f"Rating must be between {MIN_RATING} and {MAX_RATING}"
    API_NOT_FOUND = "API not found"
    USER_NOT_FOUND = "User not found"


class CreateReviewHandler:
    """Handler for CreateReview command.

    Dependencies (injected via constructor):
        - ApiRepository: Listing existence check
        - UserRepository: Author lookup
        - ReviewRepository: Persistence
        - LoggerProtocol: Structured logging
    """

    def __init__(
        self,
        api_repo: ApiRepository,
        user_repo: UserRepository,
        review_repo: ReviewRepository,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            api_repo: API listing repository.
            user_repo: User repository.
            review_repo: Review repository.
            logger: Logger.
        """
        self._api_repo = api_repo
        self._user_repo = user_repo
        self._review_repo = review_repo
        self._logger = logger

    async def handle(self, cmd: CreateReview) -> Result[ReviewResult, str]:
        """Handle CreateReview command.

        Args:
            cmd: CreateReview command.

        Returns:
            Success(ReviewResult): Review created.
            Failure(error): Invalid rating, unknown listing or unknown user.
        """
        if not MIN_RATING <= cmd.rating <= MAX_RATING:
            return Failure(error=CreateReviewError.INVALID_RATING)

        if await self._api_repo.find_by_id(cmd.api_id) is None:
            return Failure(error=CreateReviewError.API_NOT_FOUND)

        author = await self._user_repo.find_by_id(cmd.user_id)
        if author is None:
            return Failure(error=CreateReviewError.USER_NOT_FOUND)

        review = Review(
            id=uuid7(),
            api_id=cmd.api_id,
            user_id=cmd.user_id,
            rating=cmd.rating,
            content=cmd.content or None,
        )
        await self._review_repo.save(review)

        self._logger.info(
            "review_created",
            review_id=str(review.id),
            api_id=str(review.api_id),
            rating=review.rating,
        )

        return Success(value=ReviewResult.from_entity(review, author))
