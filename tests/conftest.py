import sys
from pathlib import Path

# 添加 src 目录到Python路径，未安装包时也能运行测试
SRC_DIR = Path(__file__).resolve().parent.parent / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))
