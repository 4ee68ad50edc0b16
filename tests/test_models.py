"""Tests for the leaf model classes."""

import pytest
from collections import Counter
from dataclasses import FrozenInstanceError

from charsheet.catalog import ARMOR, RACES, WEAPONS
from charsheet.errors import InsufficientFundsError, RulesInvariantError
from charsheet.models.abilities import AbilityScore, CharacterAbilities, derive_ability_modifier
from charsheet.models.base import (
    Ability, ArmorCategory, ArmorType, Language, ModifierType, Race, WeaponCategory, WeaponProperty,
    WeaponType
)
from charsheet.models.currency import (
    Coin, Denomination, Wealth, copper, electrum, gold, platinum, silver
)
from charsheet.models.equipment import Armor, DamageRange, Weapon
from charsheet.models.spellcasting import SpellSlot
from charsheet.models.traits import (
    AbilityIncrease, AbilityModifier, ArmorProficiencyModifier, Trait, WeaponProficiencyModifier
)


class TestAbilityModifier:
    """Test ability score to modifier derivation."""

    SCORE_MODIFIERS = [
        -5, -4, -4, -3, -3, -2, -2, -1, -1, 0,
        0, 1, 1, 2, 2, 3, 3, 4, 4, 5,
        5, 6, 6, 7, 7, 8, 8, 9, 9, 10,
    ]

    def test_modifier_table(self):
        """Test scores 1-30 against the standard modifier table."""
        for score, expected in enumerate(self.SCORE_MODIFIERS, start=1):
            assert derive_ability_modifier(score) == expected

    def test_modifier_boundaries(self):
        """Test the lowest and highest effective scores."""
        assert derive_ability_modifier(0) == -5
        assert derive_ability_modifier(10) == 0
        assert derive_ability_modifier(31) == 10

    def test_modifier_out_of_range(self):
        """Test modifiers outside [-5, 10] are invariant violations."""
        with pytest.raises(RulesInvariantError):
            derive_ability_modifier(32)

        with pytest.raises(RulesInvariantError):
            derive_ability_modifier(-1)

        with pytest.raises(AssertionError):
            derive_ability_modifier(40)


class TestAbilityScores:
    """Test ability score entries and the six-score collection."""

    def test_from_score(self):
        """Test modifiers are derived on construction."""
        score = AbilityScore.from_score(Ability.DEXTERITY, 17)
        assert score.modifier == 3

    def test_mismatched_modifier(self):
        """Test a stored modifier must match its score."""
        with pytest.raises(RulesInvariantError):
            AbilityScore(ability=Ability.STRENGTH, score=14, modifier=0)

    def test_score_validation(self):
        """Test scores are limited to 0-30."""
        with pytest.raises(ValueError):
            AbilityScore.from_score(Ability.STRENGTH, 31)

        with pytest.raises(ValueError):
            AbilityScore.from_score(Ability.STRENGTH, -1)

    def test_default_scores(self):
        """Test missing abilities default to 10."""
        abilities = CharacterAbilities.from_scores({Ability.STRENGTH: 16})
        assert abilities.strength == 16
        assert abilities.str_modifier == 3
        assert abilities.dexterity == 10
        assert abilities.dex_modifier == 0
        assert len(abilities) == 6

    def test_lookup_by_ability(self):
        """Test indexing finds the single entry for an ability."""
        abilities = CharacterAbilities.from_scores({Ability.WISDOM: 8})
        assert abilities[Ability.WISDOM] == AbilityScore(Ability.WISDOM, 8, -1)

    def test_requires_all_six(self):
        """Test the collection rejects missing or duplicate abilities."""
        five = [AbilityScore.from_score(a, 10) for a in Ability if a != Ability.CHARISMA]
        with pytest.raises(RulesInvariantError):
            CharacterAbilities(five)

        duplicated = five + [AbilityScore.from_score(Ability.STRENGTH, 12)]
        with pytest.raises(RulesInvariantError):
            CharacterAbilities(duplicated)

    def test_set_score(self):
        """Test replacing a score recomputes its modifier."""
        abilities = CharacterAbilities.from_scores({})
        abilities.set_score(Ability.CONSTITUTION, 18)
        assert abilities.constitution == 18
        assert abilities.con_modifier == 4

        with pytest.raises(ValueError):
            abilities.set_score(Ability.CONSTITUTION, 31)
        assert abilities.constitution == 18

    def test_serialization(self):
        """Test scores serialize by ability abbreviation."""
        abilities = CharacterAbilities.from_scores({Ability.INTELLIGENCE: 18})
        data = abilities.to_dict()
        assert data['int'] == 18
        assert data['cha'] == 10

        restored = CharacterAbilities.from_dict(data)
        assert restored == abilities


class TestCurrency:
    """Test coin conversion and arithmetic."""

    def test_standard_exchange_rates(self):
        """Test 100 of each coin sums to the exact copper total."""
        total = copper(100) + silver(100) + electrum(100) + gold(100) + platinum(100)
        assert total == Coin.new(100 * (1 + 10 + 50 + 100 + 1000), Denomination.COPPER)
        assert total.copper == 111100

    def test_new_scales_by_denomination(self):
        """Test construction multiplies by the scale factor."""
        for denomination in Denomination:
            assert Coin.new(7, denomination).copper == 7 * denomination.scale

    def test_conversion_is_associative(self):
        """Test converting a sum equals summing the conversions."""
        amounts = [(3, Denomination.PLATINUM), (7, Denomination.GOLD), (11, Denomination.ELECTRUM)]
        summed = sum((Coin.new(a, d) for a, d in amounts), Coin())
        assert summed.copper == sum(a * d.scale for a, d in amounts)

    def test_fractional_amounts(self):
        """Test fractional amounts must convert to whole copper."""
        assert Coin.new(1.5, Denomination.GOLD).copper == 150
        assert Coin.new("0.1", Denomination.SILVER).copper == 1

        with pytest.raises(ValueError):
            Coin.new(0.5, Denomination.COPPER)

    def test_subtraction(self):
        """Test subtraction happens in copper."""
        assert (gold(1) - silver(3)).copper == 70

    def test_display(self):
        """Test display converts without changing the stored value."""
        purse = Coin(1250)
        assert purse.format(Denomination.GOLD) == "12.5 gp"
        assert purse.in_denomination(Denomination.SILVER) == 125.0
        assert Coin(1000).format(Denomination.GOLD) == "10 gp"
        assert str(Coin(7)) == "7 cp"
        assert purse.copper == 1250

    def test_ordering(self):
        """Test coins compare by value."""
        assert silver(11) > gold(1)
        assert electrum(2) == gold(1)

    def test_from_dict_rejects_non_integer(self):
        """Test coin documents must hold integer copper."""
        with pytest.raises(TypeError):
            Coin.from_dict("10 gp")


class TestWealth:
    """Test purse management."""

    def test_add_and_total(self):
        """Test the total combines every denomination."""
        wealth = Wealth()
        wealth.add_copper(5)
        wealth.add(2, Denomination.GOLD)
        wealth.add(1, Denomination.PLATINUM)
        assert wealth.total == Coin(1205)
        assert wealth.count(Denomination.GOLD) == 2

    def test_remove(self):
        """Test removing coins and insufficient funds."""
        wealth = Wealth()
        wealth.add_copper(10)
        wealth.remove_copper(4)
        assert wealth.count(Denomination.COPPER) == 6

        with pytest.raises(InsufficientFundsError):
            wealth.remove_copper(7)
        assert wealth.count(Denomination.COPPER) == 6

    def test_negative_amounts(self):
        """Test negative coin counts are rejected."""
        wealth = Wealth()
        with pytest.raises(ValueError):
            wealth.add(-1, Denomination.SILVER)
        with pytest.raises(ValueError):
            Wealth(coins={Denomination.SILVER: -3})

    def test_non_integer_counts(self):
        """Test fractional and non-numeric coin counts are rejected on entry."""
        wealth = Wealth()
        with pytest.raises(TypeError):
            wealth.add(1.5, Denomination.COPPER)
        with pytest.raises(TypeError):
            wealth.remove("2", Denomination.GOLD)
        with pytest.raises(TypeError):
            Wealth(coins={Denomination.GOLD: 2.5})
        assert wealth.total == Coin()

    def test_serialization(self):
        """Test purses serialize by abbreviation."""
        wealth = Wealth()
        wealth.add(3, Denomination.ELECTRUM)
        data = wealth.to_dict()
        assert data == {'cp': 0, 'sp': 0, 'ep': 3, 'gp': 0, 'pp': 0}
        assert Wealth.from_dict(data) == wealth

        del data['pp']
        with pytest.raises(KeyError):
            Wealth.from_dict(data)


class TestEquipment:
    """Test weapon and armor models."""

    def test_weapon(self):
        """Test weapon properties form a sorted multiset."""
        bow = Weapon(
            name="Shortbow",
            cost=gold(25),
            damage=DamageRange(1, 6),
            weapon_type=WeaponType.RANGED,
            category=WeaponCategory.SIMPLE,
            properties=[WeaponProperty.AMMUNITION, WeaponProperty.TWO_HANDED]
        )
        assert bow.properties == (WeaponProperty.AMMUNITION, WeaponProperty.TWO_HANDED)
        assert bow.property_counts == Counter({WeaponProperty.AMMUNITION: 1, WeaponProperty.TWO_HANDED: 1})
        assert bow.is_ranged
        assert not bow.is_melee
        assert bow.has_property(WeaponProperty.TWO_HANDED)
        assert not bow.has_property(WeaponProperty.FINESSE)

        data = bow.to_dict()
        assert data['properties'] == ['ammunition', 'two_handed']
        assert data['cost'] == 2500
        assert Weapon.from_dict(data) == bow

    def test_damage_range_validation(self):
        """Test damage ranges must not be inverted."""
        with pytest.raises(ValueError):
            DamageRange(6, 1)

    def test_armor(self):
        """Test armor properties and serialization."""
        chain_mail = Armor(
            armor_type=ArmorType.CHAIN_MAIL,
            category=ArmorCategory.HEAVY,
            base_armor_class=16,
            cost=gold(75),
            weight=55,
            ability_requirement=AbilityScore.from_score(Ability.STRENGTH, 13),
            has_stealth_disadvantage=True
        )
        assert chain_mail.is_heavy
        assert not chain_mail.is_light
        assert chain_mail.cost_gp == 75.0

        data = chain_mail.to_dict()
        assert data['ability_requirement'] == {'ability': 'str', 'score': 13, 'modifier': 1}
        assert Armor.from_dict(data) == chain_mail

        del data['weight']
        with pytest.raises(KeyError):
            Armor.from_dict(data)


class TestTraits:
    """Test trait modifiers."""

    @pytest.fixture
    def dwarf_training(self):
        return Trait(
            name="Dwarven Training",
            description="Axes and armor",
            weapon_proficiency_modifiers=[WeaponProficiencyModifier("Axes", WeaponType.MELEE)],
            armor_proficiency_modifiers=[
                ArmorProficiencyModifier("Light", ArmorCategory.LIGHT),
                ArmorProficiencyModifier("Medium", ArmorCategory.MEDIUM),
            ],
            ability_modifiers=[
                AbilityModifier("Toughness", AbilityIncrease(Ability.CONSTITUTION, 2))
            ]
        )

    def test_uniform_iteration(self, dwarf_training):
        """Test every modifier exposes name, value and type."""
        modifiers = list(dwarf_training.modifiers())
        assert [m.get_name() for m in modifiers] == ["Axes", "Light", "Medium", "Toughness"]
        assert [m.get_modifier_type() for m in modifiers] == [
            ModifierType.WEAPON_PROFICIENCY,
            ModifierType.ARMOR_PROFICIENCY,
            ModifierType.ARMOR_PROFICIENCY,
            ModifierType.ABILITY,
        ]
        assert modifiers[-1].get_value() == AbilityIncrease(Ability.CONSTITUTION, 2)

    def test_modifiers_of_type(self, dwarf_training):
        """Test filtering by modifier type."""
        armor = dwarf_training.modifiers_of_type(ModifierType.ARMOR_PROFICIENCY)
        assert [m.get_value() for m in armor] == [ArmorCategory.LIGHT, ArmorCategory.MEDIUM]

    def test_serialization(self, dwarf_training):
        """Test traits survive serialization."""
        assert Trait.from_dict(dwarf_training.to_dict()) == dwarf_training


class TestSpellSlot:
    """Test spell slot bookkeeping."""

    def test_spell_slot(self):
        """Test using and restoring slots."""
        slot = SpellSlot(spell_level=1, total=3)

        assert slot.remaining == 3
        assert slot.use()
        assert slot.remaining == 2

        slot.used = 3
        assert not slot.can_cast()
        assert not slot.use()

        slot.restore(1)
        assert slot.remaining == 1

        slot.restore()
        assert slot.remaining == 3

    def test_slot_validation(self):
        """Test used slots cannot exceed the total."""
        with pytest.raises(ValueError):
            SpellSlot(spell_level=2, total=1, used=2)
        with pytest.raises(ValueError):
            SpellSlot(spell_level=2, total=-1)

    def test_serialization(self):
        """Test slots survive serialization."""
        slot = SpellSlot(spell_level=4, total=2, used=1)
        assert SpellSlot.from_dict(slot.to_dict()) == slot


class TestCatalog:
    """Test the shared reference data cannot be changed by callers."""

    def test_armor_is_frozen(self):
        """Test armor entries reject attribute assignment."""
        with pytest.raises(FrozenInstanceError):
            ARMOR[ArmorType.LEATHER].base_armor_class = 99
        assert ARMOR[ArmorType.LEATHER].base_armor_class == 11

    def test_weapon_is_frozen(self):
        """Test weapon entries and their properties cannot be changed."""
        dagger = WEAPONS["Dagger"]
        with pytest.raises(FrozenInstanceError):
            dagger.properties = ()
        dagger.property_counts[WeaponProperty.HEAVY] += 1
        assert not dagger.has_property(WeaponProperty.HEAVY)

    def test_race_is_frozen(self):
        """Test race languages and traits are immutable collections."""
        dwarf = RACES[Race.DWARF]
        with pytest.raises(AttributeError):
            dwarf.languages.clear()
        with pytest.raises(AttributeError):
            dwarf.traits[0].ability_modifiers.append(None)
        with pytest.raises(FrozenInstanceError):
            dwarf.speed = 40
        assert dwarf.languages == (Language.COMMON, Language.DWARVISH)

    def test_mapping_is_read_only(self):
        """Test catalog mappings reject new entries."""
        with pytest.raises(TypeError):
            ARMOR[ArmorType.PLATE] = ARMOR[ArmorType.LEATHER]
