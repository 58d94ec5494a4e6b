"""配置文件"""
import logging

# 计算器参数
CALCULATOR_CONFIG = {
    "quit_symbol": "q",  # 注册为退出操作符的符号
    "enable_stack_operators": True,  # 是否注册 drop/dup/swap/clear
    "stop_on_error": False,  # 出错后是否结束输入循环
}

# 交互循环参数
REPL_CONFIG = {
    "prompt": "> ",
    "display_precision": None,  # 输出栈顶的有效数字位数，None表示使用repr
    "empty_stack_message": "(empty stack)",
    "show_stack": False,  # 每行后输出整个栈而不只是栈顶
}

# 日志
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    quit_symbol = CALCULATOR_CONFIG["quit_symbol"]
    assert quit_symbol and not any(ch.isspace() for ch in quit_symbol), \
        "退出符号不能为空且不能包含空白"
    precision = REPL_CONFIG["display_precision"]
    assert precision is None or precision > 0, "显示精度必须为正数或None"
    assert isinstance(logging.getLevelName(LOGGING_CONFIG["level"]), int), \
        f"未知的日志级别: {LOGGING_CONFIG['level']}"
