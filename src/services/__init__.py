from config import AppConfig, load_config
from services.progress import ProgressLedgerUpdater
from services.sync import RetryPolicy, SyncClient


def create_orchestrator(config: AppConfig | None = None):
    """Factory function to create the sync orchestrator with all dependencies."""
    from application.orchestrator import SyncOrchestrator
    from infrastructure.github_client import GitHubContentsClient
    from infrastructure.http_client import AsyncHTTPClient
    from infrastructure.screenshot import DataURLScreenshotCapture

    config = config or load_config()

    # Create infrastructure dependencies
    http_client = AsyncHTTPClient(timeout=config["http_timeout"])
    contents_client = GitHubContentsClient(
        http_client,
        api_url=config["github_api_url"],
    )
    retry_policy = RetryPolicy(
        max_attempts=config["max_attempts"],
        delay_seconds=config["retry_delay"],
    )

    return SyncOrchestrator(
        sync_client=SyncClient(contents_client, retry_policy),
        progress_updater=ProgressLedgerUpdater(contents_client),
        screenshot_capture=DataURLScreenshotCapture(),
    )


__all__ = ["ProgressLedgerUpdater", "RetryPolicy", "SyncClient", "create_orchestrator"]
