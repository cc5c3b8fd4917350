#!/usr/bin/env python3
"""
scripts/serve.py
=================
Start the RuleChain inference server.

Usage:
    python scripts/serve.py --host 0.0.0.0 --port 8000 --reload
    python scripts/serve.py --example medical
"""
import argparse
import logging
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))


def main():
    parser = argparse.ArgumentParser(description="RuleChain Inference Server")
    parser.add_argument("--host",    default="0.0.0.0", help="Bind host")
    parser.add_argument("--port",    default=8000, type=int, help="Bind port")
    parser.add_argument("--reload",  action="store_true", help="Hot reload")
    parser.add_argument("--example", default=None, help="Preload a bundled knowledge base")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    print(f"Starting RuleChain server on {args.host}:{args.port}")
    if args.example:
        print(f"Preloading example: {args.example}")

    try:
        from rulechain.core.config import ServerConfig
        from rulechain.deployment.server.app import serve
    except ImportError:
        print("Server requires: pip install fastapi uvicorn")
        sys.exit(1)

    serve(ServerConfig(host=args.host, port=args.port, reload=args.reload, example=args.example))


if __name__ == "__main__":
    main()
