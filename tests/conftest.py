"""Shared enum declarations for the identable tests."""

from __future__ import annotations

import pytest

from identable.declarations import (
    CaseDecl,
    CaseElement,
    EnumDecl,
    FuncDecl,
    Location,
    Param,
    StructDecl,
    VarDecl,
    case,
)


@pytest.fixture
def simple_enum() -> EnumDecl:
    """`enum TestEnum { case one; case two; case three }`."""
    return EnumDecl("TestEnum", members=[case("one"), case("two"), case("three")])


@pytest.fixture
def one_line_enum() -> EnumDecl:
    """`enum TestEnum { case one, two, three }`."""
    return EnumDecl(
        "TestEnum",
        members=[CaseDecl(CaseElement("one"), CaseElement("two"), CaseElement("three"))],
    )


@pytest.fixture
def unlabeled_enum() -> EnumDecl:
    """`enum TestEnum { case one(String) }`."""
    return EnumDecl("TestEnum", members=[case("one", Param(None, "String"))])


@pytest.fixture
def id_enum() -> EnumDecl:
    """Cases with and without identity values, mixed with other members."""
    return EnumDecl(
        "TestEnum",
        members=[
            case("one", Param("id", "String")),
            case("two", Param("model", "String")),
            VarDecl("title", "String"),
            case("three"),
            FuncDecl("describe"),
            case("four", Param("xxx", "Int"), Param("modelId", "String")),
        ],
        location=Location("TestEnum.swift", 2, 1),
    )


@pytest.fixture
def destination_enum() -> EnumDecl:
    """`enum Destination { case destination(id: Int, a: String) }`."""
    return EnumDecl(
        "Destination",
        members=[case("destination", Param("id", "Int"), Param("a", "String"))],
    )


@pytest.fixture
def multi_id_enum() -> EnumDecl:
    """A case with more than one identity value."""
    return EnumDecl(
        "Membership",
        members=[
            case("guest"),
            case(
                "member",
                Param("ownerId", "String"),
                Param("note", "String"),
                Param("groupID", "Int"),
            ),
        ],
    )


@pytest.fixture
def struct_decl() -> StructDecl:
    return StructDecl("Foo", location=Location("Foo.swift", 1, 1))


@pytest.fixture
def empty_enum() -> EnumDecl:
    return EnumDecl("Foo", members=[FuncDecl("bar")], location=Location("Foo.swift", 4, 1))
