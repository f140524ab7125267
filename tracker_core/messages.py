"""User-facing message strings shared by the parser, commands and UI."""

INVALID_COMMAND_MESSAGE = "Invalid command. Use \"help\" to show the list of possible commands."
NON_NUMERIC_AMOUNT_MESSAGE = "Only numeric inputs are allowed for amount."
NON_POSITIVE_AMOUNT_MESSAGE = "Only positive numeric inputs are allowed for amount."
AMOUNT_TOO_LARGE_MESSAGE = "Amount must be less than 1,000,000,000,000."
BLANK_DESCRIPTION_MESSAGE = "Description cannot be blank."
BLANK_CATEGORY_MESSAGE = "Category cannot be blank."
NON_NUMERIC_INDEX_MESSAGE = "Only numeric inputs are allowed for index."
NON_POSITIVE_INDEX_MESSAGE = "Only positive integers are allowed for index."
DATE_FORMAT_MESSAGE = "Dates must be in the format yyyy-MM-dd, e.g. 2023-01-31."
EXPENSE_NOT_FOUND_MESSAGE = "Expense with index {index} not found. There are {size} expense(s)."
INCOME_NOT_FOUND_MESSAGE = "Income with index {index} not found. There are {size} income(s)."

HELP_ROWS = (
    ("help", "show this message"),
    ("add_ex d/DESCRIPTION a/AMOUNT c/CATEGORY [D/DATE]", "add an expense"),
    ("add_in d/DESCRIPTION a/AMOUNT c/CATEGORY [D/DATE]", "add an income"),
    ("del_ex i/INDEX", "delete an expense"),
    ("del_in i/INDEX", "delete an income"),
    ("list_ex", "list all expenses"),
    ("list_in", "list all incomes"),
    ("total_ex", "total of all expenses"),
    ("total_in", "total of all incomes"),
    ("btw_ex s/START_DATE e/END_DATE", "total expense between two dates"),
    ("btw_in s/START_DATE e/END_DATE", "total income between two dates"),
    ("balance", "total income minus total expense"),
    ("set_budget c/CATEGORY a/AMOUNT", "set a monthly budget for a category"),
    ("check_budget c/CATEGORY", "show this month's spending against its budget"),
    ("end", "exit the program"),
)
_USAGE_WIDTH = max(len(usage) for usage, _ in HELP_ROWS) + 2

HELP_MESSAGE = "\n".join(
    ["Commands:"]
    + [f"  {usage:<{_USAGE_WIDTH}}{summary}" for usage, summary in HELP_ROWS]
    + ["Dates use the format yyyy-MM-dd."]
)
