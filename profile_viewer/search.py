import logging
import queue
import time
from concurrent.futures import FIRST_COMPLETED, Executor, Future, ThreadPoolExecutor, wait
from typing import Any, Callable, Optional, Set

from .errors import ProfileDecodeError, ProfileFetchError
from .github_client import GitHubClient
from .models import GitHubProfile
from .state import DECODE_ERROR, ProfileViewState, network_error

logger = logging.getLogger(__name__)


class CompletionQueue:
    """Callbacks posted by worker threads, run later on the UI thread."""

    def __init__(self):
        self._queue: "queue.Queue[tuple]" = queue.Queue()

    def post(self, callback: Callable[..., Any], *args: Any) -> None:
        self._queue.put((callback, args))

    def drain(self) -> int:
        ran = 0
        while True:
            try:
                callback, args = self._queue.get_nowait()
            except queue.Empty:
                return ran
            callback(*args)
            ran += 1

    def __len__(self) -> int:
        return self._queue.qsize()


class ProfileSearch:
    """Runs the profile lookup and the avatar download off the UI thread.

    Worker threads only post completions; ``process_completions`` (or
    ``wait_idle``) must be called from the thread that owns ``state``.
    """

    def __init__(
        self,
        client: Optional[GitHubClient] = None,
        state: Optional[ProfileViewState] = None,
        executor: Optional[Executor] = None,
        completions: Optional[CompletionQueue] = None,
    ):
        self.client = client or GitHubClient()
        self.state = state or ProfileViewState()
        self.executor = executor or ThreadPoolExecutor(max_workers=4, thread_name_prefix="profile-fetch")
        self.completions = completions or CompletionQueue()
        self._pending: Set[Future] = set()

    @property
    def busy(self) -> bool:
        return bool(self._pending) or len(self.completions) > 0

    def search(self, username: str) -> bool:
        """Start a lookup. Returns False (and shows a validation error) for a blank name."""
        username = username.strip()
        if not username:
            self.state.reject_input()
            return False

        generation = self.state.set_loading(username)
        logger.info(f"Search #{generation} for '{username}'")
        self._submit(self._fetch_profile, generation, username)
        return True

    def load_avatar(self, generation: int, avatar_url: str) -> None:
        if not avatar_url:
            return
        self._submit(self._fetch_avatar, generation, avatar_url)

    def process_completions(self) -> int:
        self._reap()
        return self.completions.drain()

    def poll(self) -> bool:
        """Apply whatever finished since the last look; True if the screen changed."""
        was_busy = self.busy
        ran = self.process_completions()
        return ran > 0 or (was_busy and not self.busy)

    def wait_idle(self, timeout: Optional[float] = None) -> bool:
        """Block until both fetches of the latest searches have been applied.

        Returns False if ``timeout`` ran out with work still outstanding.
        """
        deadline = None if timeout is None else time.monotonic() + timeout
        while self._pending:
            remaining = None if deadline is None else max(deadline - time.monotonic(), 0)
            done, _ = wait(self._pending, timeout=remaining, return_when=FIRST_COMPLETED)
            if not done:
                return False
            # applying a profile may submit the avatar fetch
            self.process_completions()
        self.process_completions()
        return True

    def _submit(self, fn: Callable[..., None], *args: Any) -> None:
        self._pending.add(self.executor.submit(fn, *args))

    def _reap(self) -> None:
        done = {f for f in self._pending if f.done()}
        self._pending -= done
        for future in done:
            # anything but the handled fetch errors is a bug; let it surface
            future.result()

    # --- worker side ---

    def _fetch_profile(self, generation: int, username: str) -> None:
        try:
            profile = self.client.fetch_profile(username)
        except ProfileDecodeError:
            self.completions.post(self.state.set_error, generation, DECODE_ERROR)
        except ProfileFetchError as e:
            self.completions.post(self.state.set_error, generation, network_error(str(e)))
        else:
            self.completions.post(self._apply_profile, generation, profile)

    def _fetch_avatar(self, generation: int, avatar_url: str) -> None:
        image = self.client.fetch_avatar(avatar_url)
        if image is not None:
            self.completions.post(self.state.set_avatar, generation, image)

    # --- UI side ---

    def _apply_profile(self, generation: int, profile: GitHubProfile) -> None:
        if self.state.set_profile(generation, profile):
            self.load_avatar(generation, profile.avatar_url)
