from sortcompare.core.models import Direction, Kind

DIRECTION_ALIASES = {
    "asc": Direction.ASC,
    "ascending": Direction.ASC,
    "desc": Direction.DESC,
    "descending": Direction.DESC,
}

DIRECTION_CHOICES = list(DIRECTION_ALIASES.keys())

DIRECTION_HELP_TEXT = (
    "Order inside each kind of value:\n"
    "  asc, ascending   : smallest first (default)\n"
    "  desc, descending : largest first\n"
    "Kinds themselves always stay in --type-order.\n"
)

KIND_CHOICES = Kind.get_all()

TYPE_ORDER_HELP_TEXT = (
    "Kinds in the order they should appear (space separated).\n"
    f"Default: {' '.join(KIND_CHOICES)}\n"
    "Values of kinds left out sort after all listed kinds.\n"
)

IGNORE_DIRECTION_HELP_TEXT = (
    "Kinds compared ascending even with --direction desc (space separated).\n"
    "Default: array. Pass the flag with no kinds to let direction apply everywhere.\n"
)

EPILOG_TEXT = """
Examples:
  Sort a JSON array from a file, print to stdout
  %(prog)s -i data.json

  Descending order, nested lists sorted first
  %(prog)s -i data.json -d desc --deep

  Read from stdin, treat ISO-8601 strings as dates, write to a file
  cat data.json | %(prog)s --parse-dates -o sorted.json --indent 2

  Put strings before numbers and let direction apply to lists too
  %(prog)s -i data.json --type-order string number boolean date array object null --ignore-direction-of
"""
