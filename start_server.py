#!/usr/bin/env python3
"""
启动 TaskHub 后端服务
任务保存在进程内存中，只能以单 worker 模式运行
"""
import sys
import os

# 添加项目根目录到路径
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

if __name__ == "__main__":
    import uvicorn
    from taskhub.config import settings

    print("=" * 50)
    print(f"🚀 启动 {settings.app_name}")
    print("=" * 50)
    print(f"Host: {settings.host}")
    print(f"Port: {settings.port}")
    print("Workers: 1")
    print("注意: 任务仅保存在内存中，重启后清空")
    print("=" * 50)

    uvicorn.run(
        "taskhub.main:app",
        host=settings.host,
        port=settings.port,
        workers=1,
        log_level=settings.log_level.lower()
    )
