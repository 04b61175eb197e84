#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
FastAPI 应用主入口
"""

import json
import logging
import os
import platform
import time

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import Response


# 自定义UTF-8 JSONResponse类，确保中文正确编码 + 强制不缓存
class UTF8JSONResponse(Response):
    media_type = "application/json; charset=utf-8"

    def __init__(self, content, **kwargs):
        super().__init__(content, **kwargs)
        self.headers["Cache-Control"] = "no-cache, no-store, must-revalidate, max-age=0"
        self.headers["Pragma"] = "no-cache"
        self.headers["Expires"] = "0"

    def render(self, content) -> bytes:
        return json.dumps(
            content,
            ensure_ascii=False,  # 不转义非ASCII字符
            allow_nan=False,
            indent=None,
            separators=(",", ":"),
        ).encode("utf-8")


project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# 优先加载 .env 文件（必须在读取配置之前）
env_path = os.path.join(project_root, '.env')
if os.path.exists(env_path):
    load_dotenv(env_path, override=True)

from server.config.app_config import get_config  # noqa: E402
from server.utils.exception_handler import ExceptionHandlerMiddleware  # noqa: E402

config = get_config()

logging.basicConfig(
    level=getattr(logging, config.log_level, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

from server.api.v1.calendar_api import router as calendar_api_router  # noqa: E402
from server.api.v1.divination import router as divination_router  # noqa: E402

app = FastAPI(
    title="GanZhi Divination API",
    description="干支历法与小六壬起卦服务",
    version="1.0.0",
    debug=config.debug,
    default_response_class=UTF8JSONResponse
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """记录请求日志，包括处理时间"""
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time

    logger.info(
        f"{request.method} {request.url.path} - "
        f"Status: {response.status_code} - "
        f"Time: {process_time:.3f}s - "
        f"Client: {request.client.host if request.client else 'unknown'}"
    )
    response.headers["X-Process-Time"] = str(process_time)
    return response


app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(GZipMiddleware, minimum_size=1000)
# 最后添加，确保能捕获所有异常
app.add_middleware(ExceptionHandlerMiddleware)

app.include_router(divination_router, prefix="/api", tags=["小六壬起卦"])
app.include_router(calendar_api_router, prefix="/api", tags=["干支历"])

logger.info(f"✓ 服务已初始化: env={config.env}, 默认时区={config.calendar.default_timezone}")


@app.get("/")
async def root():
    """根路径"""
    return {
        "message": "GanZhi Divination API",
        "version": "1.0.0",
        "docs": "/docs"
    }


@app.get("/health")
async def health_check():
    """健康检查"""
    return {
        "status": "healthy",
        "timestamp": time.time(),
        "env": config.env,
        "system": {
            "platform": platform.system(),
            "python_version": platform.python_version(),
        }
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "server.main:app",
        host="0.0.0.0",
        port=8001,
        reload=config.debug,
        workers=1
    )
