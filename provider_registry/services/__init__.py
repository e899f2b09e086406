from .backend import Backend, BackendError, NotFoundError, StorageError
from .fake_backend import FakeBackend
from .gitlab_backend import GitLabReleaseBackend
from .factory import build_backend, load_signing_keys
