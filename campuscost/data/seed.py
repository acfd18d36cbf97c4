"""Seed school records for the campuscost engine.

Year-end actual facilities costs from the "Facilities & Capex Costs" summary
(based on expense down), confirmed enrollments from the schools data sheet,
and per-student budget figures from the original approved financial models.
The set covers every school type, including pre-opening campuses.
"""

from campuscost.models.enums import SchoolType, TuitionTier
from campuscost.models.school import SchoolRecord

SEED_SCHOOL_RECORDS: list[SchoolRecord] = [
    # --- Alpha School ---
    SchoolRecord(
        school_id="alpha_miami",
        name="Alpha Miami",
        school_type=SchoolType.ALPHA_SCHOOL,
        tuition_tier=TuitionTier.PREMIUM,
        tuition=50_000.0,
        current_enrollment=69,
        capacity=184,
        sqft=30_000.0,
        lease=1_811_276.0,
        utilities=136_199.0,
        repairs=404_913.0,
        it_maintenance=121_161.0,
        security=314_640.0,
        landscaping=96_487.0,
        janitorial=110_450.0,
        food_services=573_405.0,
        transportation=183_403.0,
        capex_buildout=1_367_252.0,
        total_excluding_capex=3_751_935.0,
        total_including_capex=3_888_660.0,
        model_facilities_per_student=12_054.0,
        model_capex_per_student=7_431.0,
    ),
    SchoolRecord(
        school_id="alpha_hs_austin",
        name="Alpha High School Austin",
        school_type=SchoolType.ALPHA_SCHOOL,
        tuition_tier=TuitionTier.STANDARD,
        tuition=40_000.0,
        current_enrollment=61,
        capacity=206,
        sqft=22_000.0,
        lease=613_400.0,
        utilities=179_838.0,
        repairs=517_486.0,
        it_maintenance=296_421.0,
        security=285_000.0,
        landscaping=9_776.0,
        janitorial=129_432.0,
        food_services=779_264.0,
        transportation=83_196.0,
        capex_buildout=953_196.0,
        total_excluding_capex=2_893_812.0,
        total_including_capex=2_989_132.0,
        model_facilities_per_student=11_133.0,
        model_capex_per_student=4_627.0,
    ),
    SchoolRecord(
        school_id="austin_spyglass",
        name="Alpha Austin Spyglass",
        school_type=SchoolType.ALPHA_SCHOOL,
        tuition_tier=TuitionTier.STANDARD,
        tuition=40_000.0,
        current_enrollment=212,
        capacity=212,
        sqft=20_047.0,
        lease=1_708_000.0,
        utilities=73_123.0,
        repairs=160_825.0,
        it_maintenance=52_914.0,
        security=285_000.0,
        landscaping=10_679.0,
        janitorial=85_917.0,
        food_services=271_436.0,
        transportation=19_948.0,
        capex_buildout=1_043_292.0,
        total_excluding_capex=2_667_841.0,
        total_including_capex=2_772_171.0,
        model_facilities_per_student=12_191.0,
        model_capex_per_student=4_921.0,
    ),
    # --- Growth Alpha ---
    SchoolRecord(
        school_id="alpha_ny",
        name="Alpha New York",
        school_type=SchoolType.GROWTH_ALPHA,
        tuition_tier=TuitionTier.PREMIUM,
        tuition=65_000.0,
        current_enrollment=33,
        capacity=123,
        sqft=15_350.0,
        lease=1_200_881.0,
        utilities=122_883.0,
        repairs=187_532.0,
        it_maintenance=27_762.0,
        security=326_819.0,
        landscaping=0.0,
        janitorial=12_572.0,
        food_services=577_064.0,
        transportation=1_202_272.0,
        capex_buildout=946_720.0,
        total_excluding_capex=3_657_784.0,
        total_including_capex=3_752_456.0,
        model_facilities_per_student=12_920.0,
        model_capex_per_student=7_697.0,
    ),
    SchoolRecord(
        school_id="alpha_santa_barbara",
        name="Alpha Santa Barbara",
        school_type=SchoolType.GROWTH_ALPHA,
        tuition_tier=TuitionTier.PREMIUM,
        tuition=50_000.0,
        current_enrollment=13,
        capacity=78,
        sqft=13_820.0,
        lease=156_984.0,
        utilities=10_381.0,
        repairs=196_965.0,
        it_maintenance=259_935.0,
        security=114_000.0,
        landscaping=0.0,
        janitorial=64_587.0,
        food_services=246_914.0,
        transportation=0.0,
        capex_buildout=750_000.0,
        total_excluding_capex=1_049_766.0,
        total_including_capex=1_124_766.0,
        model_facilities_per_student=3_974.0,
        model_capex_per_student=9_615.0,
    ),
    SchoolRecord(
        school_id="alpha_piedmont",
        name="Alpha Piedmont",
        school_type=SchoolType.GROWTH_ALPHA,
        tuition_tier=TuitionTier.PREMIUM,
        tuition=65_000.0,
        current_enrollment=0,
        capacity=106,
        sqft=5_000.0,
        lease=251_996.0,
        security=181_602.0,
        capex_buildout=1_765_580.0,
        total_excluding_capex=433_598.0,
        total_including_capex=1_316_388.0,
        model_facilities_per_student=4_606.0,
        model_capex_per_student=16_720.0,
    ),
    # --- MicroSchool ---
    SchoolRecord(
        school_id="alpha_boston",
        name="Alpha Boston",
        school_type=SchoolType.MICROSCHOOL,
        tuition_tier=TuitionTier.PREMIUM,
        tuition=65_000.0,
        current_enrollment=0,
        capacity=25,
        sqft=3_000.0,
        lease=272_736.0,
        repairs=1_481.0,
        security=123_766.0,
        capex_buildout=496_442.0,
        total_excluding_capex=397_983.0,
        total_including_capex=646_204.0,
        model_facilities_per_student=16_360.0,
        model_capex_per_student=19_858.0,
    ),
    SchoolRecord(
        school_id="alpha_chantilly",
        name="Alpha Chantilly",
        school_type=SchoolType.MICROSCHOOL,
        tuition_tier=TuitionTier.PREMIUM,
        tuition=65_000.0,
        current_enrollment=4,
        capacity=25,
        sqft=24_820.0,
        lease=100_000.0,
        repairs=64_525.0,
        it_maintenance=21_464.0,
        security=103_075.0,
        janitorial=13_544.0,
        food_services=117_943.0,
        transportation=69_449.0,
        capex_buildout=25_000.0,
        total_excluding_capex=489_999.0,
        total_including_capex=502_499.0,
        model_facilities_per_student=4_250.0,
        model_capex_per_student=1_000.0,
    ),
    # --- Alternative Models ---
    SchoolRecord(
        school_id="gt_school",
        name="GT School",
        school_type=SchoolType.ALTERNATIVE,
        tuition_tier=TuitionTier.VALUE,
        tuition=25_000.0,
        current_enrollment=21,
        capacity=180,
        sqft=12_664.0,
        lease=497_868.0,
        utilities=221_529.0,
        repairs=175_635.0,
        it_maintenance=91_240.0,
        security=99_066.0,
        landscaping=9_494.0,
        janitorial=52_310.0,
        food_services=720_481.0,
        transportation=145_640.0,
        capex_buildout=916_436.0,
        total_excluding_capex=2_013_263.0,
        total_including_capex=2_104_907.0,
        model_facilities_per_student=5_627.0,
        model_capex_per_student=5_091.0,
    ),
    SchoolRecord(
        school_id="montessorium",
        name="Montessorium Brushy Creek",
        school_type=SchoolType.ALTERNATIVE,
        tuition_tier=TuitionTier.VALUE,
        tuition=25_000.0,
        current_enrollment=18,
        capacity=25,
        sqft=14_462.0,
        lease=75_000.0,
        repairs=10_746.0,
        it_maintenance=5_760.0,
        capex_buildout=25_000.0,
        total_excluding_capex=91_506.0,
        total_including_capex=104_006.0,
        model_facilities_per_student=3_250.0,
        model_capex_per_student=1_000.0,
    ),
    # --- Low Cost Models ---
    SchoolRecord(
        school_id="nova_austin",
        name="Nova Austin",
        school_type=SchoolType.LOW_DOLLAR,
        tuition_tier=TuitionTier.ECONOMY,
        tuition=15_000.0,
        current_enrollment=22,
        capacity=252,
        sqft=8_261.0,
        lease=204_000.0,
        utilities=149_718.0,
        repairs=95_716.0,
        it_maintenance=64_526.0,
        security=99_066.0,
        landscaping=10_825.0,
        janitorial=26_537.0,
        food_services=479_693.0,
        transportation=0.0,
        capex_buildout=400_000.0,
        total_excluding_capex=1_130_080.0,
        total_including_capex=1_170_080.0,
        model_facilities_per_student=1_694.0,
        model_capex_per_student=1_587.0,
    ),
    SchoolRecord(
        school_id="brownsville",
        name="Alpha Brownsville",
        school_type=SchoolType.LOW_DOLLAR,
        tuition_tier=TuitionTier.ECONOMY,
        tuition=15_000.0,
        current_enrollment=42,
        capacity=55,
        sqft=4_417.0,
        lease=36_000.0,
        utilities=29_375.0,
        repairs=63_073.0,
        it_maintenance=45_771.0,
        security=129_580.0,
        landscaping=28_250.0,
        janitorial=2_522.0,
        food_services=202_148.0,
        transportation=11_503.0,
        capex_buildout=105_049.0,
        total_excluding_capex=548_223.0,
        total_including_capex=558_728.0,
        model_facilities_per_student=4_400.0,
        model_capex_per_student=1_910.0,
    ),
]
