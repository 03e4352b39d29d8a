#!/usr/bin/env python3
"""
Shared configuration utility for the supergroup directory.

Provides flexible .env file discovery and access to the data directory,
API password and web server settings.
"""

import os
from pathlib import Path
from dotenv import load_dotenv
from typing import List, Optional

ENV_FILE_NAMES = (".env.supergroups", ".env")
DEFAULT_DATA_DIR = "data"
DEFAULT_CORS_ORIGINS = "http://localhost:5173"


class ConfigManager:
    """
    Centralized configuration management for the supergroup directory.
    
    Features:
    - Flexible .env file discovery (current dir + up to 2 parent dirs)
    - Data directory and API password lookup
    - Typed environment variable helpers
    """
    
    def __init__(self):
        self._env_loaded = False
        self._env_path: Optional[Path] = None
        self.load_environment()
    
    def load_environment(self) -> bool:
        """
        Search for and load an env file with flexible path discovery.
        
        Search order (".env.supergroups" before ".env" in each directory):
        1. Current working directory
        2. One level up (parent directory)  
        3. Two levels up (grandparent directory)
        
        Values already present in the process environment win over the file.
        
        Returns:
            bool: True if an env file was found and loaded, False otherwise
        """
        if self._env_loaded:
            return True
            
        search_paths = [
            Path.cwd(),
            Path.cwd().parent,
            Path.cwd().parent.parent
        ]
        
        for search_path in search_paths:
            for file_name in ENV_FILE_NAMES:
                env_file = search_path / file_name
                if env_file.exists() and env_file.is_file():
                    print(f"Loading {file_name} from: {env_file}")
                    load_dotenv(env_file, override=False)
                    self._env_path = env_file
                    self._env_loaded = True
                    return True
        
        return False
    
    def get_data_dir(self) -> Path:
        """
        Get the directory holding the supergroup table and CSV.
        
        Returns:
            Path: SUPERGROUPS_DATA_DIR, default "data" relative to the cwd
        """
        return Path(os.getenv("SUPERGROUPS_DATA_DIR", DEFAULT_DATA_DIR))
    
    def get_api_password(self) -> Optional[str]:
        """
        Get the password that unlocks the data endpoint.
        
        Returns:
            Optional[str]: TOP_SECRET_PASSWORD, or None when unset or empty
        """
        return os.getenv("TOP_SECRET_PASSWORD") or None
    
    def get_cors_origins(self) -> List[str]:
        """Allowed CORS origins from the comma-separated CORS_ORIGINS."""
        origins = os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
        return [origin.strip() for origin in origins.split(",") if origin.strip()]
    
    def print_config_summary(self) -> None:
        """Print a summary of current configuration for debugging."""
        print("\n=== Configuration Summary ===")
        print(f"Environment file: {self._env_path or 'Not found'}")
        print(f"Data directory: {self.get_data_dir()}")
        print(f"CORS origins: {', '.join(self.get_cors_origins())}")
        
        # Don't print the actual password
        password = self.get_api_password()
        if password:
            print(f"API password: {'*' * len(password)}")
        else:
            print("API password: Not set (data endpoint disabled)")
        print("==============================\n")
    
    def get_env_string(self, key: str, default: str = None) -> str:
        """
        Get string environment variable.
        
        Args:
            key: Environment variable name
            default: Default value if not found
            
        Returns:
            str: Environment variable value or default
        """
        return os.getenv(key, default)
    
    def get_env_int(self, key: str, default: int) -> int:
        """
        Get integer environment variable.
        
        Args:
            key: Environment variable name
            default: Default value if not found or invalid
            
        Returns:
            int: Environment variable value or default
        """
        value = os.getenv(key)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            print(f"Warning: Invalid integer value for {key}, using default {default}")
            return default
    
    def get_env_bool(self, key: str, default: bool) -> bool:
        """
        Get boolean environment variable.
        
        Args:
            key: Environment variable name
            default: Default value if not found
            
        Returns:
            bool: True if value is 'true', '1', 'yes', 'on' (case-insensitive)
        """
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ('true', '1', 'yes', 'on')


# Global singleton instance for easy import
config = ConfigManager()


def get_data_dir() -> Path:
    """Convenience function to get the configured data directory."""
    return config.get_data_dir()


def get_api_password() -> Optional[str]:
    """Convenience function to get the data endpoint password."""
    return config.get_api_password()


def get_cors_origins() -> List[str]:
    """Convenience function to get allowed CORS origins."""
    return config.get_cors_origins()


def get_env_string(key: str, default: str = None) -> str:
    """Convenience function for getting string environment variable."""
    return config.get_env_string(key, default)


def get_env_int(key: str, default: int) -> int:
    """Convenience function for getting integer environment variable."""
    return config.get_env_int(key, default)


def get_env_bool(key: str, default: bool) -> bool:
    """Convenience function for getting boolean environment variable."""
    return config.get_env_bool(key, default)


if __name__ == "__main__":
    config.print_config_summary()
