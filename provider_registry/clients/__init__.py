from .gitlab_releases import GitLabClientError, GitLabReleasesClient, normalize_host

__all__ = ["GitLabClientError", "GitLabReleasesClient", "normalize_host"]
