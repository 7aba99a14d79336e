"""
Compiler Main Module
====================

This module chains the four stages into the complete compiler:

    Source → Lex → Parse → Transform → Generate → Output

Usage
-----
Command line:
    $ sexpc program.lisp -o program.c

Programmatic:
    >>> from sexpc import compile
    >>> compile("(add 2 (subtract 4 2))")
    'add(2, subtract(4, 2));'

Error Handling
--------------
Every stage fails fast. The first error raised by any stage propagates
to the caller unchanged; there is no partial output and no retry.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from sexpc.compiler.lexer import Lexer, Token
from sexpc.compiler.parser import Parser
from sexpc.compiler.transformer import Transformer
from sexpc.compiler.codegen import CodeGenerator
from sexpc.compiler import ast as source_ast
from sexpc.compiler import target


logger = logging.getLogger(__name__)


@dataclass
class CompilerOptions:
    """
    Compiler configuration options.

    Attributes:
        filename: Default source name used in error messages when
                  compile_source() is not given one
        trailing_newline: Append a newline to non-empty output, as
                          expected when writing a text file
    """
    filename: str = "<input>"
    trailing_newline: bool = False


@dataclass
class CompilerResult:
    """
    Result of a compilation, with every intermediate product.

    Attributes:
        filename: Source filename
        output: Generated target source text
        tokens: Token list from the lexer
        ast: Source AST from the parser
        target_ast: Target AST from the transformer
    """
    filename: str = ""
    output: str = ""
    tokens: list[Token] = field(default_factory=list)
    ast: Optional[source_ast.Program] = None
    target_ast: Optional[target.Program] = None

    @property
    def token_count(self) -> int:
        return len(self.tokens)


class Compiler:
    """
    Call-expression to C-like source compiler.

    Example:
        compiler = Compiler()
        result = compiler.compile_source("(add 2 2)")
        print(result.output)

    Attributes:
        options: Compiler configuration options
    """

    def __init__(self, options: Optional[CompilerOptions] = None):
        self.options = options or CompilerOptions()

    def compile_source(self, source: str, filename: Optional[str] = None) -> CompilerResult:
        """
        Compile source text.

        Args:
            source: Program text in the call-expression language
            filename: Source filename for error messages

        Returns:
            CompilerResult containing the output and intermediates

        Raises:
            CompilerError: From whichever stage failed first
        """
        filename = filename or self.options.filename
        result = CompilerResult(filename=filename)

        # Stage 1: Lexical analysis
        result.tokens = Lexer(source, filename).tokenize()
        logger.debug(f"{filename}: lexed {result.token_count} tokens")

        # Stage 2: Parsing
        result.ast = Parser(result.tokens, filename, source.splitlines()).parse()
        logger.debug(f"{filename}: parsed {len(result.ast.body)} top-level expressions")

        # Stage 3: Transformation
        result.target_ast = Transformer().transform(result.ast)

        # Stage 4: Code generation
        output = CodeGenerator().generate(result.target_ast)
        if self.options.trailing_newline and output:
            output += "\n"
        result.output = output
        logger.debug(f"{filename}: generated {len(output)} characters")

        return result

    def compile_file(self, filepath: str | Path) -> CompilerResult:
        """
        Compile a source file.

        Raises:
            CompilerError: If compilation fails
            FileNotFoundError: If the source file does not exist
        """
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Source file not found: {filepath}")

        source = path.read_text(encoding="utf-8")
        return self.compile_source(source, str(filepath))


# =============================================================================
# Convenience Functions
# =============================================================================

def compile(source: str, filename: str = "<input>") -> str:
    """
    Compile call-expression source to C-like source.

    This is the primary high-level interface.

    Args:
        source: Program text, e.g. "(add 2 (subtract 4 2))"
        filename: Source filename for error messages

    Returns:
        Generated text, e.g. "add(2, subtract(4, 2));"

    Raises:
        CompilerError: From whichever stage failed first
    """
    return Compiler().compile_source(source, filename).output
