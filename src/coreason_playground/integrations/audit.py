import hashlib

from coreason_playground.utils.logger import logger


class AuditLogger:
    """Standalone audit trail for submissions.

    Logs every submission to the shared loguru sinks.
    """

    def __init__(self, enabled: bool = True):
        """Initializes the AuditLogger.

        Args:
            enabled: Whether to emit audit records.
        """
        self.enabled = enabled
        if self.enabled:
            logger.info("Submission audit logging enabled")

    async def log_submission(self, source: str, mode: str) -> str:
        """Log a submission before it runs.

        Args:
            source: The submitted source text.
            mode: The active backend mode ('local' or 'remote').

        Returns:
            str: The SHA-256 hash of the source.
        """
        source_hash = hashlib.sha256(source.encode("utf-8")).hexdigest()
        if self.enabled:
            logger.info(f"AUDIT: Running source in {mode} mode. Hash: {source_hash}, Length: {len(source)}")
        return source_hash
