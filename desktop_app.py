import tkinter as tk
from tkinter import ttk

from loguru import logger

from app_logging import setup_logging
from profit_calculator import (
    InvalidInputError,
    calculate_profit,
    format_summary,
    parse_inputs,
)

REVENUE_HINT = "Revenue in cents (e.g. 10000000)"
EXPENSES_HINT = "Expenses in cents (e.g. 5000000)"
TAX_RATE_HINT = "Tax rate in % (e.g. 19.5)"


class ProfitCalculatorApp(tk.Tk):
    """Desktop form for the post-tax profit calculation."""

    def __init__(self):
        super().__init__()
        self.title("Profit Calculator")
        self.geometry("480x300")

        ttk.Label(self, text="Profit Calculator", font=("TkDefaultFont", 12, "bold")).grid(
            row=0, column=0, columnspan=2, padx=5, pady=(10, 5)
        )

        self.revenue_var = tk.StringVar()
        self.expenses_var = tk.StringVar()
        self.tax_rate_var = tk.StringVar()
        fields = [
            ("Revenue", self.revenue_var, REVENUE_HINT),
            ("Expenses", self.expenses_var, EXPENSES_HINT),
            ("Tax rate", self.tax_rate_var, TAX_RATE_HINT),
        ]
        for i, (label, var, hint) in enumerate(fields):
            row = 1 + 2 * i
            ttk.Label(self, text=label).grid(row=row, column=0, padx=5, pady=(5, 0), sticky="w")
            ttk.Entry(self, textvariable=var, width=30).grid(
                row=row, column=1, padx=5, pady=(5, 0)
            )
            ttk.Label(self, text=hint, foreground="gray").grid(
                row=row + 1, column=1, padx=5, sticky="w"
            )

        buttons = ttk.Frame(self)
        buttons.grid(row=7, column=0, columnspan=2, pady=10)
        ttk.Button(buttons, text="Calculate", command=self.compute).pack(side="left", padx=5)
        ttk.Button(buttons, text="Reset", command=self.reset).pack(side="left", padx=5)

        self.result_var = tk.StringVar()
        ttk.Label(self, textvariable=self.result_var, justify="left").grid(
            row=8, column=0, columnspan=2, padx=5, pady=5, sticky="w"
        )

    def compute(self):
        """Parse the form, calculate profit and display the summary."""
        try:
            revenue, expenses, tax_rate = parse_inputs(
                self.revenue_var.get(), self.expenses_var.get(), self.tax_rate_var.get()
            )
        except InvalidInputError as err:
            logger.warning("Rejected calculator input: {}", err.__cause__ or err)
            self.result_var.set(str(err))
            return
        result = calculate_profit(revenue, expenses, tax_rate)
        logger.info(
            "Calculated profit for revenue={} expenses={} tax_rate={}: {}",
            revenue,
            expenses,
            tax_rate,
            result,
        )
        self.result_var.set(format_summary(result))

    def reset(self):
        """Clear every field and the displayed result."""
        for var in (self.revenue_var, self.expenses_var, self.tax_rate_var, self.result_var):
            var.set("")


def main():
    setup_logging()
    app = ProfitCalculatorApp()
    app.mainloop()


if __name__ == "__main__":
    main()
