PROMPT_ULTRASLEAZE = (
    "[CHARACHTER], caught off guard by a blinding disposable camera flash, "
    "squints and grins wide with an obnoxiously gaudy full diamond grill. The "
    "grill is two massive, solid connected slabs (top and bottom), seamlessly "
    "fused over his teeth like walls of crystal-cut ice. Each surface is packed "
    "with razor-edged faceted diamonds, sparkling so violently they explode into "
    "neon starbursts across the frame. No natural teeth are visible — only "
    "blinding diamond armor. His wrist is cocked up near his mouth, flaunting a "
    "monstrous, diamond-drenched wristwatch the size of a brick, every inch "
    "paved with glowing stones. A comically huge pinky ring shoots exaggerated "
    "lens flares directly into the camera, while chains spill across his chest "
    "like rivers of ice. His entire pose radiates sleazy, smug, unstoppable "
    "excess — like he owns not just the jewelry, but the entire store. The "
    "setting is an upscale jewelry store, but warped into a surreal VHS fever "
    "dream. Glass display cases overflow with ridiculous heaps of diamonds, gold "
    "chains, and watches stacked in impossible piles. Every surface reflects and "
    "refracts light, so the whole store glitters like a hallucination. The "
    "overhead lights flare into purple-blue VHS streaks, distorted scanlines "
    "bend across the frame, and neon glares scatter like rainbow shrapnel. In "
    "the background, distorted reflections of him stretch across glass cases, "
    "multiplying like sleazy clones. Price tags blur into nonsense symbols, and "
    "jewelry displays seem to melt into surreal diamond puddles on the floor. "
    "The air is hazy with a bluish tint, the whole scene captured like a cursed "
    "disposable-camera snapshot of an impossible flex. The diamonds don't just "
    "sparkle — they erupt with absurd, cartoonishly blinding glares, bouncing "
    "off every case and mirror until the entire room looks radioactive with "
    "excess. The aesthetic is retro VHS chaos fused with gaudy luxury, sleaze "
    "amplified to parody, like the universe itself bent around his flex. "
    "Maintain the exact same facial features, hairstyle, skin tone, and overall "
    "appearance of [CHARACHTER], but amplify everything into a surreal, sleazy "
    "jewelry store nightmare of bling and VHS distortion."
)
