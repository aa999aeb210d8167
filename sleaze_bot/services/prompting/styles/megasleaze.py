PROMPT_MEGASLEAZE = (
    "[CHARACHTER], caught off guard, squinting under a blinding disposable "
    "camera flash, grins wide with an insanely gaudy full diamond grill. The "
    "grill is two massive, solid connected slabs (one top, one bottom), entirely "
    "encrusted with blinding faceted diamonds. The surface is seamless, like a "
    "wall of crystal-cut ice, each facet exploding with surreal sparkles. No "
    "natural teeth visible — only a fortress of diamonds, glowing so bright it "
    "looks radioactive. His wrist is cocked high to his mouth, flexing a "
    "monstrous diamond-drenched wristwatch the size of a fist, dripping with "
    "absurdly oversized stones. On his pinky, a grotesquely flashy diamond ring, "
    "comically huge, shooting starburst glares into the lens. Chains hang heavy "
    "and reckless, every surface dripping with stones. The whole pose radiates "
    "sleazy, unashamed bravado, like a villain caught in the middle of his best "
    "bad decision. The background oozes chaos — silhouettes of sweaty "
    "partygoers blur in motion, neon lights streak across the frame, and faint "
    "hints of cash float midair in the distortion. A hazy cloud of smoke drifts "
    "through, tinged bluish-purple, while a retro VHS analog filter crushes the "
    "image with scanlines, glitches, grain, and blown-out highlights. It feels "
    "like a warped, cursed snapshot ripped straight from a 90s afterparty VHS "
    "tape, frozen mid-chaos. The diamonds don't just sparkle — they burst with "
    "blinding, exaggerated flares, refracting into neon rainbow shards, "
    "scattering across the photo like lens flare shrapnel. The entire image "
    "drips with obnoxious, surreal sleaze, turning luxury into parody, excess "
    "into art. Maintain the exact same facial features, hairstyle, skin tone, "
    "and overall appearance of [CHARACHTER], but amplify everything around him "
    "into an absurd, sleazy fever dream of bling and VHS-party chaos."
)
