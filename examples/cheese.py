import sys

from clargs import Argument, Arguments, KeyEnum
from clargs.display import render_errors, render_results, render_usage


class CheeseKey(KeyEnum):
    WORST = ("w", "worst")
    KAAS = ("k", "kaas")
    TOPPING = ("t", "topping")


arguments = (
    Arguments.builder()
    .add(Argument.builder().set_key(CheeseKey.KAAS).set_required(True).set_value_required().build())
    .add(Argument.builder().set_key(CheeseKey.WORST).set_required(True).set_value_optional().build())
    .add(Argument.builder().set_key(CheeseKey.TOPPING).set_value_optional().build())
    .build()
    .parse_args(sys.argv[1:])
)

render_usage(arguments, title="cheese")
print(f"There are {len(arguments.get_arguments_with_errors())} arguments with errors")
render_errors(arguments)
print(f"There are {len(arguments.get())} arguments")
render_results(arguments)
