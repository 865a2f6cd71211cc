# civicdesk

Plain-text record keeping for five small desk applications. Each one is
built as models, a file-backed repository and a service that tells its
observers about every successful change:

- `civicdesk.auction`: art items with bid offers and users
  (`models.Item`, `models.Offer`, `models.Date`, `models.User`,
  `repository.Repository`, `service.AuctionService`)
- `civicdesk.delivery`: couriers and parcels
  (`models.Courier`, `models.Package`, `controller.Controller`)
- `civicdesk.drive`: drivers, road reports and a shared chat
  (`models.Driver`, `models.Report`, `repository.Repository`,
  `service.DriveService`)
- `civicdesk.patients`: doctors and patients
  (`models.Doctor`, `models.Patient`, `models.Date`,
  `repository.Repository`, `service.PatientService`)
- `civicdesk.volunteering`: departments and volunteers
  (`models.Department`, `models.Volunteer`, `repository.Repository`,
  `service.VolunteeringService`)

## Files

Each repository (and the delivery `Controller`) reads two text files when it
is created, one record per line, fields separated by `;`. Both files must
already exist; blank lines are skipped. The file of changing records (items,
packages, reports, patients, volunteers) is written back whole after every
change. The other file (users, couriers, drivers, doctors, departments) is
only read.

Example lines, as the models parse and format them:

```
Sunset ; painting ; 150 ; 1, 3-5-2024, 150          # auction item
Ana ; 1 ; collector                                 # auction user
Ana;Main,12;46,23;0                                 # delivery package
Bob ; Main 12, Oak 3 ; 46, 23, 5                    # courier
Pothole;Ana;10,20;0                                 # road report
Ana ; 10, 20 ; 7                                    # driver
Ana;flu;internal;Dr. Pop;3-5-2024                   # patient
Dr. Pop ; internal                                  # doctor
Ana;ana@example.com;animals,music;No department     # volunteer
Shelter ; care for animals                          # department
```

Unreadable or unwritable files, duplicate records and missing records are
raised as exceptions: `RepositoryError` in each repository module and
`DeliveryError` in `civicdesk.delivery.controller`. Rules checked by the
services (a bid not above the current price, a report too far from the
driver, validating one's own report, an empty patient name, assigning a
volunteer who already has a department) raise `ValueError`.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
import datetime

from civicdesk.auction.repository import Repository
from civicdesk.auction.service import AuctionService
from civicdesk.observer import Observer


class Printer(Observer):
    def update(self):
        print("items changed")


repository = Repository("users.txt", "items.txt")  # both files must exist
service = AuctionService(repository)
service.register_observer(Printer())

service.add_item("Sunset", "painting", 100)
service.bid_item("Sunset ; painting ; 100", 150, 1, datetime.date.today())
print(service.find_item("Sunset ; painting ; 150").offers_report())
```

`bid_item` takes the item as shown by `Item.describe()`; the date of the
offer defaults to today when none is given. `offers_report()` lists the
offers newest first.

## Observers

Observers subclass `civicdesk.observer.Observer` and implement `update()`.
Every service, and the delivery `Controller`, is a
`civicdesk.observer.Subject` with `register_observer`, `unregister_observer`
and `notify`, and calls `notify()` after each successful change.

## Text helpers

`civicdesk.text.trim` strips surrounding space characters and
`civicdesk.text.tokenize` splits a line on a single delimiter, giving no
tokens for an empty string and no empty token after a trailing delimiter.

## What it does not do

The package holds the records and the rules only. It has no windows,
screens or maps, and no command to start it: showing lists, picking
records and drawing locations are left to the program that uses it. The
drive chat kept by `DriveService.add_message` lives in memory and is not
saved to any file.