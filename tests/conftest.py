# tests/conftest.py
import os
import sys

import pytest

# 프로젝트 루트를 sys.path 맨 앞에 넣어서, 설치 없이 pytest 를 실행해도
# 'alarm_notifier' 패키지를 import 할 수 있게 한다.
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)


@pytest.fixture
def anyio_backend():
    # Lambda 진입점이 asyncio.run 을 쓰므로 asyncio 만 사용
    return "asyncio"
