"""配置文件"""
import logging

logger = logging.getLogger(__name__)

# 求值器参数
CALCULATOR_CONFIG = {
    "trace": False,  # 每一步输出剩余token和栈内容，默认关闭
    "position_base": {
        "evaluate": 1,  # 求值器错误位置从1开始
        "render": 0,  # 渲染器错误位置从0开始（保留原有行为）
    },
}

# 中缀渲染参数
RENDER_CONFIG = {
    "paren_operators": ("*", "/"),  # 只有乘除需要给操作数加括号
}

# 批量报表
REPORT_CONFIG = {
    "columns": ["formula", "infix", "value", "error"],
    "value_dtype": "Int64",  # pandas可空整数
}

# 日志
LOGGING_CONFIG = {
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert CALCULATOR_CONFIG["trace"] is False, "trace默认必须关闭"
    assert CALCULATOR_CONFIG["position_base"]["evaluate"] == 1, "求值器位置从1开始"
    assert CALCULATOR_CONFIG["position_base"]["render"] == 0, "渲染器位置从0开始"
    assert set(RENDER_CONFIG["paren_operators"]) <= {"+", "-", "*", "/", "%"}, "未知的操作符"
    assert REPORT_CONFIG["columns"][0] == "formula"
    logger.info("Configuration validated successfully!")
