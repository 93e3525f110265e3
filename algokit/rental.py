"""Car rental counter: fares, invoices and an interactive booking session."""

from __future__ import annotations

import argparse
import getpass
import hmac
import sys
import time
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

ACCESS_PIN = "1234"
MINIMUM_ADVANCE = 5000
INVOICE_NUMBER = "#OD-XYZ"
CAUTION_MONEY = 0

_LABEL_WIDTH = 33
_CELL_WIDTH = 10
_RULE = "/" * 59
_UNDERLINE = " " + "_" * 56


class CarModel(Enum):
    """The cars on offer, each with its menu code and rent per day."""

    TATA = ("A", "TATA CAR", 1050)
    HYUNDAI = ("B", "HYUNDAI CAR", 1700)
    MARUTI_SUZUKI = ("C", "MARUTI SUZUKI CAR", 1500)
    BMW = ("D", "BMW CAR", 2000)
    AUDI = ("E", "AUDI CAR", 2500)

    def __init__(self, code: str, label: str, daily_rate: int) -> None:
        self.code = code
        self.label = label
        self.daily_rate = daily_rate

    @classmethod
    def from_code(cls, code: str) -> "CarModel":
        """Return the model chosen by its menu letter."""
        for model in cls:
            if model.code == code:
                return model
        raise ValueError(f"unknown car model {code!r}")


@dataclass(frozen=True)
class Customer:
    """Personal details recorded for a booking."""

    first_name: str
    last_name: str
    age: str = ""
    aadhaar_number: str = ""
    licence_number: str = ""
    phone: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class Booking:
    """A rental of some cars of one model for a number of days."""

    customer: Customer
    model: CarModel
    cars: int
    days: int
    date: str = ""
    advance: int = 0

    def __post_init__(self) -> None:
        if self.cars < 0:
            raise ValueError("number of cars must not be negative")
        if self.days < 0:
            raise ValueError("number of days must not be negative")

    @property
    def rental_fee(self) -> int:
        return self.days * self.model.daily_rate * self.cars

    @property
    def due(self) -> int:
        return self.rental_fee - self.advance


def check_pin(pin: str) -> bool:
    """True if ``pin`` opens the counter."""
    return hmac.compare_digest(pin.encode(), ACCESS_PIN.encode())


def _row(label: str, cell: str) -> str:
    return f"{'| ' + label:-<{_LABEL_WIDTH}}|{cell} |"


def render_invoice(booking: Booking) -> str:
    """Render the customer invoice for ``booking``."""
    customer = booking.customer
    lines = [
        "CAR RENTAL - CUSTOMER INVOICE",
        _RULE,
        _row("Invoice No. :", f"{INVOICE_NUMBER:>{_CELL_WIDTH}}"),
        _row("Customer Name:", f"{customer.first_name:>2} {customer.last_name}"),
        _row("Customer phone number :", f"{customer.phone:>{_CELL_WIDTH}}"),
        _row("Car Model :", f"{booking.model.code:>{_CELL_WIDTH}}"),
        _row("Number of cars :", f"{booking.cars:>{_CELL_WIDTH}}"),
        _row("Number of days :", f"{booking.days:>{_CELL_WIDTH}}"),
        _row("Car rental date :", f"{booking.date:>{_CELL_WIDTH}}"),
        _row("Your Rental Amount is :", f"{booking.rental_fee:>{_CELL_WIDTH}}"),
        _row("Caution Money :", f"{CAUTION_MONEY:>{_CELL_WIDTH}}"),
        _row("Advanced :", f"{booking.advance:>{_CELL_WIDTH}}"),
        _UNDERLINE,
        "",
        _row("Total Rental Amount is :", f"{booking.rental_fee:>{_CELL_WIDTH}}/-"),
        _row("Total DUE Amount is :", f"{booking.due:>{_CELL_WIDTH}}/-"),
        _UNDERLINE,
        " You can easily pay both in offline and online mode #",
        "  HOPE YOU ENJOYED OUR SERVICE",
        " DO NOT FORGET TO RATE US...(5*)",
        " HAVE A GOOD DAY (^:^)...",
        "",
        _RULE,
        "TERMS & CONDITIONS :-",
        f"You are advised to pay up the [{booking.due}/-] amount before due date.",
        "Otherwise a penalty fee will be applied (^!^)",
        _RULE,
    ]
    return "\n".join(lines) + "\n"


def _show_file(path: Path) -> None:
    if path.is_file():
        for line in path.read_text(errors="replace").splitlines():
            print(line)


def _read_pin(prompt: str) -> str:
    if sys.stdin.isatty():
        return getpass.getpass(prompt)
    return input(prompt)


def _login() -> None:
    while True:
        print("\nWELCOME TO CAR RENTAL MANAGEMENT SYSTEM")
        print("||--------------------------------------||")
        print("              LOGIN REQUIRED")
        print("||--------------------------------------||\n")
        if check_pin(_read_pin("KINDLY ENTER THE PIN : ")):
            print("\n[Access Granted!]")
            return
        print("\nAccess Aborted...\nPlease Try Again\n")


def _ask_int(prompt: str, minimum: int | None = None) -> int:
    while True:
        text = input(prompt).strip()
        try:
            number = int(text)
        except ValueError:
            print("Please enter a whole number.")
            continue
        if minimum is not None and number < minimum:
            print(f"Please enter a number of at least {minimum}.")
            continue
        return number


def _ask_customer() -> Customer:
    print("\nCAR RENTAL SYSTEM")
    print("-----------------------------------------\n")
    print("[KINDLY FILL UP YOUR PERSONAL INFORMATION]\n")
    customer = Customer(
        first_name=input("Please Enter your first Name :- ").strip(),
        last_name=input("Please Enter your last Name :- ").strip(),
        age=input("Enter your age --> ").strip(),
        aadhaar_number=input("Enter your aadhaar card no. --> ").strip(),
        licence_number=input("Enter your driving licence no. = ").strip(),
        phone=input("Enter your phone number := ").strip(),
    )
    print("\n[[ YOUR INFORMATION HAS BEEN RECORDED ]]")
    return customer


def _ask_model(data_dir: Path, wait) -> CarModel:
    while True:
        print("\n   Please Select a Car")
        for model in CarModel:
            print(f"    *Enter '({model.code})' for {model.label}.")
        code = input("\nChoose a Car from the above options :- ").strip()
        print("-" * 74)
        try:
            model = CarModel.from_code(code)
        except ValueError:
            print("Invalid Car Model. Please try again!")
            continue
        print(f"<<__ You have chosen {model.label} __>>")
        print(f"<<__ PER DAY RENT :- {model.daily_rate}/- __>>")
        _show_file(data_dir / f"{model.code}.txt")
        wait(1)
        return model


def main(argv: Sequence[str] | None = None) -> int:
    """Run one interactive booking at the rental counter."""
    parser = argparse.ArgumentParser(
        prog="car-rental", description="Book a rental car and print the invoice."
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=Path("."),
        help="directory holding the car descriptions A.txt to E.txt and thank_you.txt",
    )
    parser.add_argument(
        "--no-pause", action="store_true", help="skip the delays and the final pause"
    )
    args = parser.parse_args(argv)

    def wait(seconds: float) -> None:
        if not args.no_pause:
            time.sleep(seconds)

    try:
        _login()
        customer = _ask_customer()
        model = _ask_model(args.data_dir, wait)
        print("_" * 78)
        print("Please provide the following information :- ")
        print("-------------------------------------------")
        cars = _ask_int("Please enter how many car you want :=  ", minimum=0)
        days = _ask_int("\nNumber of days you wish to rent the car := ", minimum=0)
        date = input("\nEnter today's date (DD/MM/YY) :=  ").strip()
        print(f"\nPay advance for access the car :\n(minimum {MINIMUM_ADVANCE} you have to pay )")
        advance = _ask_int("\nEnter your advance amount := ")
        print("\n[[ TRANSACTION SUCCESSFUL ]]")

        booking = Booking(customer, model, cars, days, date, advance)
        wait(1)
        print("\n Calculating rent. Please wait......")
        wait(3)
        print()
        print(render_invoice(booking), end="")
        if not args.no_pause:
            input("Press Enter to continue . . .")
    except EOFError:
        print("\ninput ended before the booking was complete", file=sys.stderr)
        return 1

    _show_file(args.data_dir / "thank_you.txt")
    return 0