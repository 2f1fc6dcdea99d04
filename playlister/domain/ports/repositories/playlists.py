from abc import ABC
from abc import abstractmethod
from collections.abc import Sequence

from playlister.domain.entities.music import Playlist


class PlaylistRepository(ABC):
    """A repository persisting the whole playlist collection as a single unit.

    There is no per-playlist access: the collection is always read and written
    in full.
    """

    @abstractmethod
    async def load_playlists(self) -> list[Playlist]:
        """Retrieves every persisted playlist, songs included.

        Returns:
            A list of `Playlist` entities in their persisted order, or an empty
            list if nothing has been persisted yet.

        Raises:
            StorageError: If the persisted state cannot be read or decoded.
        """
        ...

    @abstractmethod
    async def save_playlists(self, playlists: Sequence[Playlist]) -> None:
        """Persists the given playlists, fully replacing any previous state.

        Args:
            playlists: The complete collection to persist.

        Raises:
            StorageError: If the collection cannot be encoded or written.
        """
        ...
