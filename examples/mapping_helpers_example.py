"""Minimal example exercising the dict-extensions helpers."""

from dataclasses import dataclass

from dict_extensions import add_range_by_key, flatten_values, merge_into, to_object, try_find_key_by_value


@dataclass
class Person:
    name: str = ""
    age: int = 0


def main() -> None:
    """Run each helper on small in-memory mappings."""
    teams = {"ops": ["ann", "bo"], "dev": ["cy"]}
    print("members:", flatten_values(teams))

    settings = {"retries": 1, "timeout": 5}
    merge_into(settings, {"timeout": 10})
    print(f"{settings=}")

    people: dict[str, Person] = {}
    add_range_by_key(people, [Person("ann", 31), Person("bo", 27)], lambda person: person.name)
    print("people:", list(people))

    print("lookup:", try_find_key_by_value(settings, 10))
    print("built:", to_object({"name": "cy", "age": "40"}, Person))


if __name__ == "__main__":
    main()
