"""The catalog: CPUs as published by their vendors, and shop listings.

Names are entered as the vendor spells them; ``NormalizedName`` strips
the trademark marks so shop listings without them still match.
"""

from __future__ import annotations

from hardwaredb.catalog.models import (
    CPU,
    PCIe,
    ByteSize,
    GHz,
    Listing,
    MTPerSec,
    Price,
    ProductLine,
    Watt,
)
from hardwaredb.constants import (
    Architecture,
    Brand,
    CoolerType,
    CPUSocket,
    GraphicsModel,
    MarketSegment,
    MemorySubtype,
    MemoryType,
    Shop,
    Usage,
)
from hardwaredb.values.dates import Date
from hardwaredb.values.names import NormalizedName
from hardwaredb.values.uncertain import MISSING, PresentWithDoubt, lift

_name = NormalizedName.of

_ZEN2_LAUNCH_NOTE = "from https://en.wikipedia.org/wiki/Zen_2"

CPUS: tuple[CPU, ...] = (
    CPU(
        name=_name("AMD Ryzen™ 9 5950X"),
        url="https://www.amd.com/en/product/10456",
        product_line=lift(ProductLine(Brand.RYZEN_9, lift(Usage.DESKTOP))),
        architecture=lift(Architecture.ZEN3),
        cores=lift(16),
        threads=lift(32),
        l2cache=lift(ByteSize.mb(8)),
        l3cache=lift(ByteSize.mb(64)),
        tdp=lift(Watt(105)),
        base_clock=lift(GHz(3.4)),
        cooler=lift(CoolerType.LIQUID_RECOMMENDED),
        launch_date=Date.parse_value("11/5/2020"),
        cpu_socket=lift(CPUSocket.AM4),
        pcie=lift(PCIe(4.0)),
        memory_type=lift(MemoryType.DDR4),
        memory_speed=lift(MTPerSec(3200)),
        graphics_model=lift(GraphicsModel.NONE),
    ),
    CPU(
        name=_name("AMD Ryzen™ 9 PRO 7945"),
        url="https://www.amd.com/en/product/13496",
        # guess
        product_line=lift(ProductLine(Brand.RYZEN_9, lift(Usage.DESKTOP))),
        architecture=lift(Architecture.ZEN4),
        cores=lift(12),
        threads=lift(24),
        l1cache=lift(ByteSize.kb(768)),
        l2cache=lift(ByteSize.mb(12)),
        l3cache=lift(ByteSize.mb(64)),
        tdp=lift(Watt(65)),
        base_clock=lift(GHz(3.7)),
        max_boost_clock=lift(GHz(5.4)),
        launch_date=Date.parse_value("6/13/2023"),
        cpu_socket=lift(CPUSocket.AM5),
        memory_channels=lift(2),
        pcie=lift(
            PCIe(
                5.0,
                PresentWithDoubt(
                    24,
                    "Native PCIe Lanes (Total/Usable) 28 / 24, plus "
                    "chipset-dependent lanes from the motherboard",
                ),
            )
        ),
        memory_type=lift(MemoryType.DDR5),
        memory_subtype=lift(MemorySubtype.UDIMM),
        ecc_support=lift(True),
        graphics_model=lift(GraphicsModel.RADEON),
    ),
    CPU(
        name=_name("AMD Ryzen™ Threadripper™ PRO 5955WX"),
        url="https://www.amd.com/en/products/cpu/amd-ryzen-threadripper-pro-5955wx",
        product_line=lift(
            ProductLine(
                Brand.RYZEN_THREADRIPPER_PRO_5000WX, lift(Usage.DESKTOP)
            )
        ),
        architecture=lift(Architecture.ZEN3),
        cores=lift(16),
        threads=lift(32),
        l1cache=lift(ByteSize.mb(1)),
        l2cache=lift(ByteSize.mb(8)),
        l3cache=lift(ByteSize.mb(64)),
        tdp=lift(Watt(280)),
        base_clock=lift(GHz(4.0)),
        max_boost_clock=lift(GHz(4.5)),
        launch_date=Date.parse_value("3/8/2022"),
        cpu_socket=lift(CPUSocket("sWRX8")),
        memory_channels=lift(8),
        pcie=lift(PCIe(4.0)),
        memory_type=lift(MemoryType.DDR4),
        memory_speed=lift(MTPerSec(3200)),
        graphics_model=lift(GraphicsModel.NONE),
    ),
    CPU(
        name=_name("AMD Ryzen 9 7950X3D"),
        url="https://www.amd.com/en/products/apu/amd-ryzen-9-7950x3d",
        market_segment=lift(MarketSegment.ENTHUSIAST_DESKTOP),
        product_line=lift(ProductLine(Brand.RYZEN_9)),
        architecture=lift(Architecture.ZEN4),
        cores=lift(16),
        threads=lift(32),
        l1cache=lift(ByteSize.mb(1)),
        l2cache=lift(ByteSize.mb(16)),
        l3cache=lift(ByteSize.mb(128)),
        tdp=lift(Watt(120)),
        base_clock=lift(GHz(4.2)),
        max_boost_clock=lift(GHz(5.7)),
        cooler=lift(CoolerType.LIQUID_RECOMMENDED),
        launch_date=Date.parse_value("2/28/2023"),
        cpu_socket=lift(CPUSocket("AM5")),
        memory_channels=lift(2),
        pcie=lift(PCIe(5.0)),
        memory_type=lift(MemoryType.DDR5),
        memory_subtype=lift(MemorySubtype.UDIMM),
        ecc_support=lift(True),
        graphics_model=lift(GraphicsModel.RADEON),
    ),
    CPU(
        name=_name("AMD Ryzen 9 3950X"),
        url="https://www.amd.com/en/product/8486",
        market_segment=lift(MarketSegment.ENTHUSIAST_DESKTOP),
        product_line=lift(ProductLine(Brand.RYZEN_9, lift(Usage.DESKTOP))),
        architecture=lift(Architecture.ZEN2),
        cores=lift(16),
        threads=lift(32),
        l1cache=lift(ByteSize.mb(1)),
        l2cache=lift(ByteSize.mb(8)),
        l3cache=lift(ByteSize.mb(64)),
        tdp=lift(Watt(105)),
        base_clock=lift(GHz(3.5)),
        max_boost_clock=lift(GHz(4.7)),
        cooler=lift(CoolerType.LIQUID_RECOMMENDED),
        launch_date=Date.parse_value("7/7/2019"),
        cpu_socket=lift(CPUSocket("AM4")),
        memory_channels=lift(2),
        pcie=lift(PCIe(4.0)),
        memory_type=lift(MemoryType.DDR4),
        memory_subtype=lift(MemorySubtype.UDIMM),
        ecc_support=lift(True),
        graphics_model=lift(GraphicsModel.NONE),
    ),
    CPU(
        name=_name("AMD EPYC 7502P"),
        url="https://www.amd.com/en/products/cpu/amd-epyc-7502p",
        product_line=lift(
            ProductLine(Brand.EPYC_7002, lift(Usage.SERVER_OR_EMBEDDED))
        ),
        architecture=lift(Architecture.INFINITY),
        cores=lift(32),
        threads=lift(64),
        l3cache=lift(ByteSize.mb(128)),
        tdp=lift(Watt(180)),
        base_clock=lift(GHz(2.5)),
        max_boost_clock=lift(GHz(3.35)),
        launch_date=Date.parse_value("August 7, 2019", _ZEN2_LAUNCH_NOTE),
        cpu_socket=lift(CPUSocket("SP3")),
        memory_channels=lift(8),
        pcie=lift(PCIe(4.0, lift(128))),
        memory_type=lift(MemoryType.DDR4),
        memory_speed=lift(MTPerSec(3200)),
        graphics_model=lift(GraphicsModel.NONE),
    ),
    CPU(
        name=_name("AMD EPYC 7443"),
        url="https://www.amd.com/en/products/cpu/amd-epyc-7443",
        market_segment=lift(MarketSegment.SERVER),
        product_line=lift(ProductLine(Brand.EPYC_7003, lift(Usage.SERVER))),
        architecture=lift(Architecture.INFINITY),
        cores=lift(24),
        threads=lift(48),
        base_clock=lift(GHz(2.85)),
        launch_date=Date.parse_value("3/15/2021"),
        cpu_socket=lift(CPUSocket("SP3")),
        memory_channels=lift(8),
        pcie=lift(PCIe(4.0, lift(128))),
        memory_type=lift(MemoryType.DDR4),
    ),
    CPU(
        name=_name("AMD EPYC™ 7352"),
        url="https://www.amd.com/en/products/cpu/amd-epyc-7352",
        product_line=lift(
            ProductLine(Brand.EPYC_7002, lift(Usage.SERVER_OR_EMBEDDED))
        ),
        architecture=lift(Architecture.INFINITY),
        cores=lift(24),
        threads=lift(48),
        tdp=lift(Watt(155)),
        base_clock=lift(GHz(2.3)),
        max_boost_clock=lift(GHz(3.2)),
        launch_date=Date.parse_value("August 7, 2019", _ZEN2_LAUNCH_NOTE),
        cpu_socket=lift(CPUSocket("SP3")),
        memory_channels=lift(8),
        pcie=lift(PCIe(4.0, lift(128))),
    ),
    CPU(
        name=_name("AMD EPYC 9224"),
        url="https://www.amd.com/en/products/cpu/amd-epyc-9224",
        product_line=lift(
            ProductLine(Brand.EPYC_9004, lift(Usage.SERVER_OR_EMBEDDED))
        ),
        architecture=lift(Architecture.INFINITY),
        cores=lift(24),
        threads=lift(48),
        base_clock=lift(GHz(2.5)),
        launch_date=Date.parse_value("11/10/2022"),
        cpu_socket=lift(CPUSocket("SP5")),
        memory_type=lift(MemoryType.DDR5),
    ),
    CPU(
        name=_name("AMD Ryzen™ 9 7950X"),
        url="https://www.amd.com/en/products/cpu/amd-ryzen-9-7950x",
        product_line=lift(ProductLine(Brand.RYZEN_9)),
        architecture=lift(Architecture("Zen 4")),
        cores=lift(16),
        threads=lift(32),
        base_clock=lift(GHz(4.5)),
        launch_date=Date.parse_value("9/27/2022"),
        cpu_socket=lift(CPUSocket("AM5")),
        memory_type=lift(MemoryType.DDR5),
    ),
    CPU(
        name=_name("AMD Ryzen™ Threadripper™ 7960X"),
        url="https://www.amd.com/en/products/cpu/amd-ryzen-threadripper-7960x",
        product_line=lift(ProductLine(Brand.RYZEN_THREADRIPPER)),
        architecture=lift(Architecture("Zen 4")),
        cores=lift(24),
        threads=lift(48),
        base_clock=lift(GHz(4.2)),
        launch_date=Date.parse_value("10/19/2023"),
        cpu_socket=lift(CPUSocket("sTR5")),
        memory_type=lift(MemoryType.DDR5),
    ),
    CPU(
        # "Intel® Xeon® Gold 6248R Processor"
        name=_name("Intel 6248R"),
        url="https://ark.intel.com/content/www/us/en/ark/products/199351/intel-xeon-gold-6248r-processor-35-75m-cache-3-00-ghz.html",
        market_segment=lift(MarketSegment.SERVER),
        product_line=MISSING,
        architecture=MISSING,
        cores=lift(24),
        threads=lift(48),
        base_clock=lift(GHz(3.0)),
        launch_date=Date.parse_value("Q1'20"),
        cpu_socket=lift(CPUSocket("FCLGA3647")),
    ),
)

_DIGITEC = "https://www.digitec.ch/en/s1/product/"

LISTINGS: tuple[Listing, ...] = (
    Listing(
        article_name=_name("AMD Ryzen™ 9 5950X"),
        url=_DIGITEC + "amd-ryzen-9-5950x-am4-340-ghz-16-core-processors-13987916",
        shop=Shop.DIGITEC,
        price=Price(366),
        desc="AMD Ryzen 9 5950X\nAM4, 3.40 GHz, 16 -Core",
        delivered="Delivered the day after tomorrow\n10 items in stock",
    ),
    Listing(
        article_name=_name("AMD Ryzen™ 9 5950X"),
        url=_DIGITEC
        + "amd-ryzen-9-5950x-am4-340-ghz-16-core-processors-13987916?shid=1399419",
        shop=Shop.DIGITEC,
        price=Price(329),
        desc="AMD Ryzen 9 5950X\nAM4, 3.40 GHz, 16 -Core",
        is_used=True,
        delivered="Delivered the day after tomorrow\nOnly 1 item in stock",
    ),
    Listing(
        article_name=_name("AMD Ryzen 9 PRO 7945"),
        url=_DIGITEC
        + "amd-ryzen-9-pro-7945-tray-version-am5-370-ghz-12-core-processors-37097588",
        shop=Shop.DIGITEC,
        price=Price(481),
        desc="AMD Ryzen 9 Pro 7945 Tray Version AM5, 3.70 GHz, 12 -Core",
        is_tray_version=True,
        delivered="Delivered Wed 3.4. Only 1 item in stock",
    ),
    Listing(
        article_name=_name("AMD Ryzen Threadripper PRO 5955WX"),
        url=_DIGITEC
        + "amd-ryzen-threadripper-pro-5955wx-4-gh-swrx8-4-ghz-16-core-processors-23263816",
        shop=Shop.DIGITEC,
        price=Price(966),
        delivered="Delivered between Wed 10.4. and Sat 13.4.",
    ),
    Listing(
        article_name=_name("AMD Ryzen Threadripper PRO 5955WX"),
        url=_DIGITEC
        + "amd-ryzen-threadripper-pro-5955wx-swrx8-4-ghz-16-core-processors-22516524",
        shop=Shop.DIGITEC,
        price=Price(997),
        delivered="Delivered between Fri 12.4. and Wed 24.4.",
    ),
    Listing(
        article_name=_name("AMD Ryzen 9 7950X3D"),
        url=_DIGITEC
        + "amd-ryzen-9-7950x3d-am5-420-ghz-16-core-processors-24107476",
        shop=Shop.DIGITEC,
        price=Price(570),
        delivered="Delivered Wed 3.4.\nMore than 10 items in stock",
    ),
    Listing(
        article_name=_name("AMD EPYC 7502P"),
        url=_DIGITEC + "amd-epyc-7502p-sp3-250-ghz-32-core-processors-12279505",
        shop=Shop.DIGITEC,
        price=Price(1121),
        delivered="Delivered between Thu 4.4. and Thu 11.4.",
    ),
    Listing(
        article_name=_name("AMD EPYC 7502P"),
        url=_DIGITEC
        + "amd-epyc-7502p-25ghz-tray-sp3-250-ghz-32-core-processors-20922660",
        shop=Shop.DIGITEC,
        price=Price(1045),
        is_tray_version=True,
        delivered="Delivered between Tue 2.4. and Thu 4.4.",
    ),
    Listing(
        article_name=_name("AMD EPYC 7443"),
        url=_DIGITEC
        + "amd-epyc-7443-tray-4-units-only-sp3-285-ghz-24-core-processors-15655850",
        shop=Shop.DIGITEC,
        price=Price(1224),
        is_tray_version=True,
        delivered="Delivered between Tue 2.4. and Thu 4.4.",
    ),
    Listing(
        article_name=_name("AMD EPYC 7352"),
        url=_DIGITEC + "amd-epyc-7352-sp3-230-ghz-24-core-processors-12279514",
        shop=Shop.DIGITEC,
        price=Price(753),
        delivered="Delivered between Wed 10.4. and Tue 16.4.",
    ),
    Listing(
        article_name=_name("AMD EPYC 9224"),
        url=_DIGITEC
        + "amd-epyc-9224-25-ghz-24-cores-48-sp5-250-ghz-48-core-processors-32425504",
        shop=Shop.DIGITEC,
        price=Price(1755),
        delivered="Delivered between Sat 13.4. and Wed 1.5.",
    ),
    Listing(
        article_name=_name("AMD Ryzen 9 7950X"),
        url=_DIGITEC + "amd-ryzen-9-7950x-am5-450-ghz-16-core-processors-21918730",
        shop=Shop.DIGITEC,
        price=Price(511),
        delivered="Delivered Wed 3.4.\nMore than 10 items in stock",
    ),
    Listing(
        article_name=_name("AMD Ryzen Threadripper 7960X"),
        url=_DIGITEC
        + "amd-threadripper-7960x-str5-str5-420-ghz-24-core-processors-39441097",
        shop=Shop.DIGITEC,
        price=Price(1400),
        delivered="Delivered Wed 3.4.\nOnly 2 items in stock",
    ),
    Listing(
        article_name=_name("Intel 6248R"),
        url=_DIGITEC
        + "intel-intel-xeon-6248r-lga-3647-3-ghz-24-core-processors-14053584",
        shop=Shop.DIGITEC,
        price=Price(1159),
        delivered="Delivered Wed 3.4.\nOnly 1 item in stock",
    ),
)
