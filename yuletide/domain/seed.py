"""
Initial gift list, inserted once into an empty `gifts` table.

Literal strings must stay byte-identical: existing deployments compare against them.
"""
from __future__ import annotations


def _row(kid: str, item: str = "", link: str = "") -> dict[str, str]:
    return {"kid": kid, "item": item, "link": link, "helper": "", "deliveryDate": ""}


SEED_GIFTS: tuple[dict[str, str], ...] = (
    # Niko
    _row("Niko", "VTech Touch and Learn Activity Desk 4-in-1 (Age 3–5)", "https://www.amazon.com/dp/B01LXLAFJP"),
    _row("Niko", "LeapFrog Prep for Preschool Math Book", "https://www.amazon.com/dp/B0CSNB7BQD"),
    _row("Niko", "Montessori Mama Wooden Puzzle for Kids", "https://www.amazon.com/dp/B0DHPXVN8B"),
    _row("Niko", "Learning Resources All Ready for Kindergarten", "https://www.amazon.com/dp/B00SJ66RS6"),
    _row("Niko", "Aizweb Classroom Calendar Pocket Chart", "https://www.amazon.com/dp/B0CBBKBXDS"),
    # Abby
    _row("Abby", "Ms Rachel Sing and Talk Toy Doll", "https://www.amazon.com/dp/B0CX24138S"),
    _row("Abby", "Fisher-Price Baby's First Blocks and Stack Toy", "https://www.amazon.com/dp/B077H5G2Q3"),
    _row("Abby", "Adena Montessori 4-in-1 Wooden Play Kit", "https://www.amazon.com/dp/B09TW84N12"),
    _row("Abby", "Any activity table", ""),
    # Ben
    _row("Ben", "Beyblade X String Launcher Set (2 Pack)", "https://www.amazon.com/String-Launcher-Players-Battles-Spinning/dp/B0DSHZSKK4"),
    _row("Ben", "Battling Tops Game Set (Arena + Launchers)", "https://www.amazon.com/dp/B0D1K222SP"),
    _row("Ben", "Beyblade X Dagger Dran 4-70Q Booster", "https://www.amazon.com/BEYBLADE-Dagger-Booster-Takara-Battling/dp/B0DN6YYL8G"),
    _row("Ben", "Roblox Robux Digital Gift Card", "https://www.amazon.com/Robux-Roblox-Online-Game-Code/dp/B07RZ74VLR"),
    _row("Ben", "Italian Brainrot Squishy Figures (24 pcs)", "https://www.amazon.com/Italian-Brainrot-Collection-Silicone-Dashboard/dp/B0FTMS4PPQ"),
    # Olive
    _row("Olive", "Pottery Wheel for Kids – Complete Painting Kit", "https://www.amazon.com/Pottery-Wheel-Kids-Complete-Painting/dp/B0D5R6WWPZ"),
    _row("Olive", "Acrylic Painting Creativity Set (Metallic + Standard)", "https://www.amazon.com/Painting-Creativity-Supplies-Metallic-Standard/dp/B08HD89CX6"),
    _row("Olive", "Desire Deluxe Temporary Hair Colour / Makeup Set", "https://www.amazon.com/Desire-Deluxe-Makeup-Temporary-Colour/dp/B07FTGLWDR"),
    _row("Olive", "Minecraft Minecoins Pack (Digital Code)", "https://www.amazon.com/Minecraft-Minecoins-Pack-Coins-Digital/dp/B07FYN4SBM"),
    # Blank rows
    _row("Elanor"),
    _row("Henry"),
    _row("Yasha"),
    _row("Rown"),
)
