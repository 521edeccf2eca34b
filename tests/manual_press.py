#!/usr/bin/env python3

"""
手动模拟一次按钮按下，向本地服务的 /api/button/press 发送请求。

用法示例：
    python tests/manual_press.py --endpoint http://127.0.0.1:8000/api/button/press
    python tests/manual_press.py --method GET
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time

import httpx

DEFAULT_ENDPOINT = "http://127.0.0.1:8000/api/button/press"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="模拟 myStrom 按钮触发并打印响应")
    parser.add_argument(
        "--endpoint",
        default=DEFAULT_ENDPOINT,
        help=f"接口地址，默认 {DEFAULT_ENDPOINT}",
    )
    parser.add_argument(
        "--method",
        default="POST",
        choices=["GET", "POST"],
        help="请求方法（按钮两种都可配置）",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=30.0,
        help="请求超时时间（秒）",
    )
    return parser


def main() -> None:
    args = _build_parser().parse_args()
    logging.info("请求地址: %s %s", args.method, args.endpoint)

    with httpx.Client(timeout=args.timeout) as client:
        start = time.perf_counter()
        try:
            response = client.request(args.method, args.endpoint)
        except httpx.HTTPError as exc:
            logging.exception("请求失败: %s", exc)
            sys.exit(1)
        duration = time.perf_counter() - start

    logging.info("HTTP 状态: %s, 耗时: %.2fs", response.status_code, duration)
    try:
        data = response.json()
    except ValueError:
        logging.error("响应体不是 JSON：%s", response.text)
        sys.exit(1)

    logging.info("响应体(JSON):\n%s", json.dumps(data, ensure_ascii=False, indent=2))
    if response.status_code != 200:
        sys.exit(2)


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
    )
    main()
