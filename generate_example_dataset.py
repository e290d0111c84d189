import json
import random
import sys

from faker import Faker

records = []
if __name__ == "__main__":
    fake = Faker()
    n = int(sys.argv[1])
    ids = random.sample(range(2 ** 31), n)
    with open("example_records.jl", "wb") as f:
        for uid in ids:
            record = {
                "id": uid,
                "name": fake.name(),
                "job": fake.job(),
            }
            records.append(record)
            data = json.dumps(record) + "\n"
            f.write(data.encode("utf8"))

        # re-insert every other record with a new value so the tree has to
        # replace it in place
        for i, record in enumerate(records):
            if i % 2 == 0:
                record["job"] = fake.job()
                record["updated"] = True
                data = json.dumps(record) + "\n"
                f.write(data.encode("utf8"))

    with open("expected_state.jl", "wb") as f:
        for record in records:
            data = json.dumps(record) + "\n"
            f.write(data.encode("utf8"))
