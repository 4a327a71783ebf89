"""
tinyscript - a small dynamically-typed scripting language.

This package provides:
- Lexer: Tokenizes source code
- Parser: Builds an AST from tokens
- Interpreter: Walks the AST and executes it

Usage:
    from tinyscript import tokenize, parse, Interpreter

    source = '''
    func add(a, b) { return a + b }
    print add(2, 3)
    '''
    tokens = tokenize(source)
    program = parse(tokens)
    Interpreter().interpret(program)

Or in one call:
    from tinyscript import run
    run(source)
"""

__version__ = "0.1.0"

from .tokens import (
    Token,
    TokenType,
    SourceLocation,
    KEYWORDS,
    SYMBOLS,
)

from .lexer import (
    Lexer,
    tokenize,
)

from .parser import (
    Parser,
    parse,
)

from .ast import (
    # Base
    AstNode,
    AstVisitor,
    # Expressions
    Expression,
    Literal,
    Identifier,
    Grouping,
    BinaryExpression,
    UnaryExpression,
    FunctionCall,
    # Statements
    Statement,
    VariableDeclaration,
    FunctionDeclaration,
    IfStatement,
    WhileStatement,
    TryStatement,
    PrintStatement,
    ReturnStatement,
    ExpressionStatement,
    Program,
    # Helpers
    print_ast,
)

from .errors import (
    ScriptError,
    LexError,
    ParseError,
    EvalError,
    Diagnostic,
    ErrorSeverity,
)

from .runtime import (
    Interpreter,
    ExecutionContext,
    UNDEFINED,
    format_value,
    run,
)

from .config import (
    Settings,
    load_settings,
    find_settings,
)

__all__ = [
    # Tokens
    'Token',
    'TokenType',
    'SourceLocation',
    'KEYWORDS',
    'SYMBOLS',
    # Lexer
    'Lexer',
    'tokenize',
    # Parser
    'Parser',
    'parse',
    # AST
    'AstNode',
    'AstVisitor',
    'Expression',
    'Literal',
    'Identifier',
    'Grouping',
    'BinaryExpression',
    'UnaryExpression',
    'FunctionCall',
    'Statement',
    'VariableDeclaration',
    'FunctionDeclaration',
    'IfStatement',
    'WhileStatement',
    'TryStatement',
    'PrintStatement',
    'ReturnStatement',
    'ExpressionStatement',
    'Program',
    'print_ast',
    # Errors
    'ScriptError',
    'LexError',
    'ParseError',
    'EvalError',
    'Diagnostic',
    'ErrorSeverity',
    # Runtime
    'Interpreter',
    'ExecutionContext',
    'UNDEFINED',
    'format_value',
    'run',
    # Config
    'Settings',
    'load_settings',
    'find_settings',
]
