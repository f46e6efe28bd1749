"""配置文件"""
from types import MappingProxyType

# 操作符优先级（1最低，8最高）
# 一元的 ! ++ -- 不在表中：求值器只支持二元运算
PRECEDENCE_TABLE = MappingProxyType({
    "^": 7,
    "*": 6,
    "/": 6,
    "%": 6,
    "+": 5,
    "-": 5,
    ">": 4,
    ">=": 4,
    "<": 4,
    "<=": 4,
    "==": 3,
    "!=": 3,
    "&&": 2,
    "||": 1,
})

MIN_PRECEDENCE = 1
MAX_PRECEDENCE = 8

# 出现任意一个即按布尔值输出结果
LOGICAL_OPERATORS = frozenset({">", ">=", "<", "<=", "==", "!=", "&&", "||"})

# 分词参数
TOKENIZER_CONFIG = {
    "merge_pairs": frozenset({"&&", "||", "==", "!="}),
    # 可选：同时合并 >= 和 <=（与原始行为不同，默认关闭）
    "extended_merge_pairs": frozenset({"&&", "||", "==", "!=", ">=", "<="}),
}

# 控制台参数
CONSOLE_CONFIG = {
    "prompt": "\nEnter an expression (or 'quit' to exit): ",
    "quit_command": "quit",
    "farewell": "Goodbye!",
    "result_prefix": "Result: ",
    "error_prefix": "Error: ",
    "lowercase_input": True,
    "results_path": "expression_results.txt",
}

# 日志
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    for symbol, rank in PRECEDENCE_TABLE.items():
        assert MIN_PRECEDENCE <= rank <= MAX_PRECEDENCE, f"{symbol} 的优先级越界: {rank}"
    for pair in TOKENIZER_CONFIG["extended_merge_pairs"]:
        assert pair in PRECEDENCE_TABLE, f"合并的操作符 {pair} 不在优先级表中"
    assert TOKENIZER_CONFIG["merge_pairs"] <= TOKENIZER_CONFIG["extended_merge_pairs"]
    assert LOGICAL_OPERATORS <= PRECEDENCE_TABLE.keys(), "逻辑操作符必须出现在优先级表中"
    return True
