"""Discussion root repository interface."""

from abc import ABC, abstractmethod

from tewahed.domain.value import DiscussionRoot


class DiscussionRootRepository(ABC):
    """Read-only access to the questions and answers comments attach to.

    Questions and answers are owned by the wider forum; comment threads
    only need to know whether a root exists.
    """

    @abstractmethod
    async def exists(self, root: DiscussionRoot) -> bool:
        """Check whether the question or answer exists.

        Args:
            root: The discussion root

        Returns:
            True if the referenced question or answer exists
        """
        pass
