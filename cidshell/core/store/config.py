"""
Content store configuration module.

Provides configuration for the Kubo HTTP RPC client.
"""
from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class TimeoutConfig:
    """
    Timeout configuration.
    
    Applies to listing and download requests; uploads use AddOptions.timeout.
    """
    total: float = 300.0  # Total request timeout
    connect: float = 30.0  # Connection timeout
    sock_read: float = 60.0  # Socket read timeout
    
    def to_aiohttp_timeout(self):
        """Convert to aiohttp ClientTimeout."""
        import aiohttp
        return aiohttp.ClientTimeout(
            total=self.total,
            connect=self.connect,
            sock_read=self.sock_read
        )


@dataclass
class StoreConfig:
    """
    Complete store client configuration.
    
    Example:
        >>> config = StoreConfig(api_url="http://127.0.0.1:5001")
        >>> config.endpoint("ls")
        'http://127.0.0.1:5001/api/v0/ls'
    """
    # Kubo RPC API address
    api_url: str = 'http://127.0.0.1:5001'
    api_prefix: str = '/api/v0'
    
    user_agent: str = 'cidshell/1.0.0'
    
    timeout: TimeoutConfig = field(default_factory=TimeoutConfig)
    
    # Read size for cat/get streams and local file streaming
    chunk_size: int = 64 * 1024
    
    @classmethod
    def default(cls) -> 'StoreConfig':
        """Create default configuration."""
        return cls()
    
    def endpoint(self, name: str) -> str:
        """Full URL of an RPC command."""
        return f"{self.api_url.rstrip('/')}{self.api_prefix}/{name}"
    
    def get_session_kwargs(self) -> Dict[str, Any]:
        """Get kwargs for aiohttp ClientSession."""
        return {
            'headers': {'User-Agent': self.user_agent},
            'timeout': self.timeout.to_aiohttp_timeout(),
        }
