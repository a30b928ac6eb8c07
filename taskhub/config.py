from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """服务配置（环境变量前缀 TASKHUB_，支持 .env 文件）"""
    model_config = SettingsConfigDict(
        env_prefix="TASKHUB_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = Field(default="TaskHub API", description="服务名称")
    host: str = Field(default="0.0.0.0", description="监听地址")
    port: int = Field(default=8080, description="监听端口")
    log_level: str = Field(default="INFO", description="日志级别")
    cors_origins: List[str] = Field(default_factory=lambda: ["*"], description="CORS 允许的来源")


settings = Settings()
