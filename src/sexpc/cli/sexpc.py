"""
sexpc - Command-Line Interface
==============================

Compiles a call-expression program from the terminal.

Usage Examples
--------------
Compile to stdout:
    $ sexpc program.lisp

With output file:
    $ sexpc program.lisp -o program.c

From stdin:
    $ echo "(add 2 2)" | sexpc -

Inspect the stages:
    $ sexpc --tokens program.lisp
    $ sexpc --ast program.lisp
    $ sexpc --target-ast program.lisp
"""

import logging
from pathlib import Path
from typing import Optional

import click

from sexpc import __version__
from sexpc.compiler import (
    Compiler,
    CompilerOptions,
    ASTPrinter,
    format_tokens,
    parse,
    tokenize,
)
from sexpc.cli.errors import handle_cli_exception


logger = logging.getLogger(__name__)


@click.command()
@click.argument("input_file", type=click.File("r", encoding="utf-8"))
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file (default: stdout)",
)
@click.option(
    "--tokens",
    is_flag=True,
    help="Print the token list and exit",
)
@click.option(
    "--ast",
    is_flag=True,
    help="Print the source AST and exit",
)
@click.option(
    "--target-ast",
    is_flag=True,
    help="Print the target AST and exit",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output (debug logging, tracebacks on internal errors)",
)
@click.version_option(version=__version__, prog_name="sexpc")
def main(
    input_file,
    output: Optional[Path],
    tokens: bool,
    ast: bool,
    target_ast: bool,
    verbose: bool,
) -> None:
    """
    Compile call expressions to C-like call syntax.

    INPUT_FILE is the program to compile, or '-' to read stdin.

    \b
    Examples:
        sexpc program.lisp               # Print add(2, 2); to stdout
        sexpc program.lisp -o out.c      # Write to a file
        sexpc --ast program.lisp         # Dump the parsed tree
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )

    filename = input_file.name
    options = CompilerOptions(filename=filename, trailing_newline=output is not None)

    try:
        source = input_file.read()
        logger.debug(f"Read {len(source)} characters from {filename}")

        # Dumps stop at their own stage; later stages may reject the input
        if tokens:
            click.echo(format_tokens(tokenize(source, filename)))
            return
        if ast:
            tree = parse(tokenize(source, filename), filename, source.splitlines())
            click.echo(ASTPrinter().print(tree))
            return

        result = Compiler(options).compile_source(source, filename)

        if target_ast:
            click.echo(ASTPrinter().print(result.target_ast))
            return

        if output is None:
            click.echo(result.output)
            return

        output.write_text(result.output, encoding="utf-8")
        if verbose:
            click.echo(f"Compiled {filename} -> {output}", err=True)

    except Exception as e:
        handle_cli_exception(e, verbose)


if __name__ == "__main__":
    main()
