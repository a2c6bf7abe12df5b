from patternkit.patterns import Computer, ComputerPart

def test_price_of_part():
    assert ComputerPart(99).get_price() == 99

def test_price_of_empty_computer():
    assert Computer(1234).get_price() == 1234

def test_add_parts_to_computer():
    computer = Computer(10)
    computer.add(ComputerPart(10))
    computer.add(ComputerPart(10))
    assert computer.get_price() == 30

def test_nest_composites_and_leaves():
    c1, c2, c3 = Computer(1), Computer(1), Computer(1)
    c3.add(ComputerPart(1))
    c2.add(ComputerPart(1))
    c2.add(c3)
    c1.add(ComputerPart(1))
    c1.add(c2)
    assert c1.get_price() == 6

def test_remove_part_by_identity():
    computer = Computer(10)
    part, twin = ComputerPart(10), ComputerPart(10)
    computer.add(part)
    computer.add(twin)

    computer.remove(part)

    assert computer.get_price() == 20
    assert computer.components == [twin]

def test_leaf_add_remove_are_noops():
    part = ComputerPart(10)
    assert part.add(ComputerPart(5)) is None
    assert part.remove(None) is None
    assert part.get_price() == 10
